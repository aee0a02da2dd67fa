import os

os.environ.setdefault("SESSION_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from weirdbites.db.base import Base
from weirdbites.db.models import Product
from weirdbites.db.session import get_db


DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeClock:
    """Settable clock for cart timestamps and expiry."""

    def __init__(self, now: datetime = None):
        self.now = now or datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
async def engine():
    engine = create_async_engine(DATABASE_URL, echo=False, future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(engine):
    AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def sample_products(db_session):
    products = [
        Product(
            id="p-durian",
            name="Durian Chips",
            description="Crispy chips made from the king of fruits.",
            price=Decimal("12.99"),
            image_url="/static/images/products/durian-chips.jpg",
            category="Snacks",
            origin="Thailand",
            stock=50,
            is_featured=True
        ),
        Product(
            id="p-garlic",
            name="Black Garlic Chocolate",
            description="Dark chocolate infused with aged black garlic.",
            price=Decimal("15.50"),
            image_url="/static/images/products/black-garlic-chocolate.jpg",
            category="Chocolate",
            origin="Japan",
            stock=3
        ),
        Product(
            id="p-mango",
            name="Chili Mango Gummies",
            description="Sweet and spicy gummies.",
            price=Decimal("7.25"),
            image_url="/static/images/products/chili-mango-gummies.jpg",
            category="Candy",
            origin="Mexico",
            stock=0
        ),
        Product(
            id="p-wasabi",
            name="Wasabi Peas",
            description="Crunchy roasted peas coated with real wasabi.",
            price=Decimal("6.50"),
            image_url="/static/images/products/wasabi-peas.jpg",
            category="Snacks",
            origin="Japan",
            stock=75,
            is_featured=True
        ),
    ]
    db_session.add_all(products)
    await db_session.commit()
    return products


@pytest.fixture
async def client(db_session):
    from weirdbites.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
