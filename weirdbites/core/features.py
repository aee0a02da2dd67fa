"""
Feature flags.

Flags let unfinished storefront features ship switched off. Defaults live in
DEFAULT_FEATURES; the FEATURE_FLAGS setting overrides individual entries.
"""
import logging
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from weirdbites.core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


DEFAULT_FEATURES: Dict[str, bool] = {
    # Browse products
    "productListing": True,
    "productDetail": True,
    "productFiltering": True,
    "productPagination": True,
    "productSearch": False,

    # Shopping cart
    "shoppingCart": True,
    "cartPersistence": True,

    # Guest checkout
    "guestCheckout": False,
    "stripePayment": False,

    # User accounts
    "userRegistration": False,
    "userLogin": False,
    "orderHistory": False,
    "savedAddresses": False,

    # Search & reviews
    "productReviews": False,
    "advancedSearch": False,

    # Admin panel
    "adminPanel": False,
    "productManagement": False,
    "inventoryManagement": False,

    # Experimental
    "darkMode": False,
    "a11yEnhancements": False,
}


def load_features(overrides: Optional[Dict[str, bool]] = None) -> Dict[str, bool]:
    features = dict(DEFAULT_FEATURES)
    for flag, enabled in (overrides or {}).items():
        if flag not in features:
            logger.warning(f"Ignoring unknown feature flag override: {flag}")
            continue
        features[flag] = bool(enabled)
    return features


features = load_features(settings.FEATURE_FLAGS)


def is_enabled(flag: str) -> bool:
    """Raises KeyError for unknown flags."""
    if flag not in features:
        raise KeyError(f"Unknown feature flag: {flag}")
    return features[flag]


def with_feature(flag: str, on_enabled: Callable[[], T], on_disabled: Optional[Callable[[], T]] = None) -> Optional[T]:
    if is_enabled(flag):
        return on_enabled()
    if on_disabled is not None:
        return on_disabled()
    return None


def filter_by_feature(items: Iterable[dict]) -> List[dict]:
    """Keep items whose optional "feature" key is unset or enabled."""
    return [item for item in items if not item.get("feature") or is_enabled(item["feature"])]


def get_enabled_features() -> List[str]:
    return [flag for flag, enabled in features.items() if enabled]


def get_disabled_features() -> List[str]:
    return [flag for flag, enabled in features.items() if not enabled]
