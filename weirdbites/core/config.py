from pathlib import Path
from typing import Dict

from pydantic_settings import BaseSettings


BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./weirdbites.db"

    # Session (holds the visitor's cart snapshot)
    SESSION_SECRET_KEY: str
    SESSION_MAX_AGE: int = 3600 * 24 * 7  # 7 days

    # Shop Configuration
    SHOP_NAME: str = "WeirdBites"
    ENVIRONMENT: str = "development"

    # Catalog
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100
    MAX_BULK_PRODUCTS: int = 100
    FEATURED_PRODUCTS_LIMIT: int = 6

    # Cart persistence
    CART_STORAGE_KEY: str = "weirdbites_cart"
    CART_EXPIRATION_HOURS: int = 24

    # Feature flag overrides, e.g. FEATURE_FLAGS='{"productSearch": true}'
    FEATURE_FLAGS: Dict[str, bool] = {}

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
