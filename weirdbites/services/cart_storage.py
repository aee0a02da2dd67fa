"""
Cart snapshot persistence.

The cart lives in a per-visitor key/value slot (the session) as a JSON snapshot:

    {"items": [{"productId": "...", "quantity": 1, "addedAt": "..."}],
     "expiresAt": "..."}

Every save pushes expiresAt 24 hours into the future. Loads that find a missing,
unreadable or expired snapshot return an empty cart and delete what was stored.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, MutableMapping, Optional

from pydantic import ValidationError

from weirdbites.core.config import settings
from weirdbites.schemas.cart import CartLine, CartSnapshot

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = settings.CART_STORAGE_KEY
CART_EXPIRATION = timedelta(hours=settings.CART_EXPIRATION_HOURS)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_cart_expired(expires_at: datetime, now: Optional[datetime] = None) -> bool:
    """A snapshot expiring exactly now counts as expired."""
    if now is None:
        now = utcnow()
    return _as_utc(expires_at) <= _as_utc(now)


class CartStorage:
    """Reads and writes the cart snapshot under a single key of `storage`."""

    def __init__(
        self,
        storage: MutableMapping,
        key: str = CART_STORAGE_KEY,
        expiration: timedelta = CART_EXPIRATION,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.storage = storage
        self.key = key
        self.expiration = expiration
        self.clock = clock

    def save_cart(self, items: Iterable[CartLine]) -> None:
        """Persist items. Storage failures are logged, never raised."""
        try:
            snapshot = CartSnapshot(
                items=list(items),
                expires_at=self.clock() + self.expiration
            )
            self.storage[self.key] = snapshot.model_dump_json(by_alias=True)
        except Exception as e:
            logger.error(f"Failed to save cart to storage: {str(e)}")

    def load_cart(self) -> List[CartLine]:
        try:
            stored = self.storage.get(self.key)
        except Exception as e:
            logger.error(f"Failed to read cart from storage: {str(e)}")
            return []

        if not stored:
            return []

        try:
            snapshot = CartSnapshot.model_validate_json(stored)
        except ValidationError as e:
            logger.error(f"Failed to load cart from storage: {str(e)}")
            self.clear_cart_storage()
            return []

        if is_cart_expired(snapshot.expires_at, self.clock()):
            logger.info(f"Discarding cart snapshot expired at {snapshot.expires_at.isoformat()}")
            self.clear_cart_storage()
            return []

        return snapshot.items

    def clear_cart_storage(self) -> None:
        try:
            self.storage.pop(self.key, None)
        except Exception as e:
            logger.error(f"Failed to clear cart from storage: {str(e)}")
