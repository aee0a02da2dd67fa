import logging
from datetime import datetime
from typing import Callable, List, Optional

from weirdbites.schemas.cart import CartLine
from weirdbites.services.cart_storage import CartStorage, utcnow

logger = logging.getLogger(__name__)


class CartContextError(RuntimeError):
    """Raised when the cart is read on a request that never had one provided."""


class Cart:
    """
    The visitor's cart: one line per product, kept in first-added order.

    Constructing a Cart loads the stored snapshot. Every change afterwards is
    written back through the storage. Quantities are not validated here; stock
    checks belong to the callers.
    """

    def __init__(self, storage: CartStorage, clock: Callable[[], datetime] = utcnow):
        self._storage = storage
        self._clock = clock
        self._items: List[CartLine] = storage.load_cart()

    @property
    def items(self) -> List[CartLine]:
        return list(self._items)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._items)

    @property
    def product_ids(self) -> List[str]:
        return [line.product_id for line in self._items]

    def get_line(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self._items if line.product_id == product_id), None)

    def add_item(self, product_id: str) -> None:
        """Add one unit; repeated adds bump the quantity and keep added_at."""
        line = self.get_line(product_id)

        if line is not None:
            line.quantity += 1
        else:
            self._items.append(CartLine(
                product_id=product_id,
                quantity=1,
                added_at=self._clock()
            ))

        self._storage.save_cart(self._items)

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set the quantity as given. Unknown products are ignored."""
        line = self.get_line(product_id)

        if line is None:
            return

        line.quantity = quantity
        self._storage.save_cart(self._items)

    def remove_item(self, product_id: str) -> None:
        remaining = [line for line in self._items if line.product_id != product_id]

        if len(remaining) == len(self._items):
            return

        self._items = remaining
        self._storage.save_cart(self._items)

    def clear_cart(self) -> None:
        self._items = []
        self._storage.clear_cart_storage()
