from decimal import Decimal

import pytest
from sqlalchemy import select, func

from weirdbites.db.models import Product
from weirdbites.db.seed import seed_products, mark_featured, SEED_PRODUCTS
from weirdbites.services.product import (
    list_products,
    get_product,
    get_products_by_ids,
    list_categories,
    get_featured_products,
)


@pytest.mark.asyncio
async def test_list_products_ordered_by_name(db_session, sample_products):
    products, pagination = await list_products(db_session, page=1, page_size=12)

    assert [p.name for p in products] == [
        "Black Garlic Chocolate",
        "Chili Mango Gummies",
        "Durian Chips",
        "Wasabi Peas",
    ]
    assert pagination.total_items == 4
    assert pagination.total_pages == 1
    assert pagination.current_page == 1


@pytest.mark.asyncio
async def test_list_products_second_page(db_session, sample_products):
    products, pagination = await list_products(db_session, page=2, page_size=3)

    assert [p.name for p in products] == ["Wasabi Peas"]
    assert pagination.total_pages == 2
    assert pagination.page_size == 3


@pytest.mark.asyncio
async def test_list_products_by_category(db_session, sample_products):
    products, pagination = await list_products(db_session, page=1, page_size=12, category="Snacks")

    assert [p.name for p in products] == ["Durian Chips", "Wasabi Peas"]
    assert pagination.total_items == 2


@pytest.mark.asyncio
async def test_list_products_empty_catalog(db_session):
    products, pagination = await list_products(db_session)

    assert products == []
    assert pagination.total_items == 0
    assert pagination.total_pages == 0


@pytest.mark.asyncio
async def test_get_product(db_session, sample_products):
    product = await get_product(db_session, "p-durian")

    assert product.name == "Durian Chips"
    assert product.price == Decimal("12.99")
    assert product.is_featured is True


@pytest.mark.asyncio
async def test_get_missing_product(db_session, sample_products):
    assert await get_product(db_session, "nope") is None


@pytest.mark.asyncio
async def test_get_products_by_ids_skips_unknown(db_session, sample_products):
    products = await get_products_by_ids(db_session, ["p-durian", "p-garlic", "ghost"])

    assert sorted(p.id for p in products) == ["p-durian", "p-garlic"]
    assert set(products[0].model_dump()) == {"id", "name", "price", "image_url", "stock"}


@pytest.mark.asyncio
async def test_get_products_by_ids_empty(db_session, sample_products):
    assert await get_products_by_ids(db_session, []) == []


@pytest.mark.asyncio
async def test_list_categories_with_counts(db_session, sample_products):
    categories = await list_categories(db_session)

    assert [(c.name, c.count) for c in categories] == [
        ("Candy", 1),
        ("Chocolate", 1),
        ("Snacks", 2),
    ]


@pytest.mark.asyncio
async def test_featured_products(db_session, sample_products):
    featured = await get_featured_products(db_session, limit=6)

    assert [p.name for p in featured] == ["Durian Chips", "Wasabi Peas"]


@pytest.mark.asyncio
async def test_seed_replaces_catalog(db_session, sample_products):
    count = await seed_products(db_session)

    result = await db_session.execute(select(func.count(Product.id)))
    assert count == len(SEED_PRODUCTS) == 15
    assert result.scalar() == 15
    assert await get_product(db_session, "p-durian") is None


@pytest.mark.asyncio
async def test_mark_featured(db_session):
    await seed_products(db_session)

    names = await mark_featured(db_session, count=6)

    featured = await get_featured_products(db_session, limit=20)
    assert len(names) == 6
    assert sorted(p.name for p in featured) == sorted(names)
