#!/usr/bin/env python
"""
Seed the catalog with the demo snacks.

    python -m weirdbites.db.seed
"""
import asyncio
import logging
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from weirdbites.db.base import Base
from weirdbites.db.models import Product
from weirdbites.db.session import engine, async_session

logger = logging.getLogger(__name__)


SEED_PRODUCTS = [
    {
        "name": "Durian Chips",
        "description": "Crispy chips made from the king of fruits. Love it or hate it!",
        "price": Decimal("12.99"),
        "image_url": "/static/images/products/durian-chips.jpg",
        "category": "Snacks",
        "origin": "Thailand",
        "stock": 50,
    },
    {
        "name": "Black Garlic Chocolate",
        "description": "Rich dark chocolate infused with aged black garlic. Surprisingly sweet and savory.",
        "price": Decimal("15.50"),
        "image_url": "/static/images/products/black-garlic-chocolate.jpg",
        "category": "Chocolate",
        "origin": "Japan",
        "stock": 30,
    },
    {
        "name": "Sriracha Popcorn",
        "description": "Spicy and addictive popcorn with authentic Sriracha seasoning.",
        "price": Decimal("8.99"),
        "image_url": "/static/images/products/sriracha-popcorn.jpg",
        "category": "Snacks",
        "origin": "USA",
        "stock": 100,
    },
    {
        "name": "Wasabi Peas",
        "description": "Crunchy roasted peas coated with real wasabi. A fiery treat!",
        "price": Decimal("6.50"),
        "image_url": "/static/images/products/wasabi-peas.jpg",
        "category": "Snacks",
        "origin": "Japan",
        "stock": 75,
    },
    {
        "name": "Salted Egg Yolk Chips",
        "description": "Crispy potato chips with rich salted egg yolk flavor. Umami bomb!",
        "price": Decimal("9.99"),
        "image_url": "/static/images/products/salted-egg-chips.jpg",
        "category": "Snacks",
        "origin": "Singapore",
        "stock": 60,
    },
    {
        "name": "Matcha Kit Kat",
        "description": "Japanese exclusive Kit Kat with premium matcha green tea flavor.",
        "price": Decimal("18.00"),
        "image_url": "/static/images/products/matcha-kitkat.jpg",
        "category": "Chocolate",
        "origin": "Japan",
        "stock": 40,
    },
    {
        "name": "Chili Mango Gummies",
        "description": "Sweet and spicy gummies with real mango and chili powder.",
        "price": Decimal("7.25"),
        "image_url": "/static/images/products/chili-mango-gummies.jpg",
        "category": "Candy",
        "origin": "Mexico",
        "stock": 80,
    },
    {
        "name": "Seaweed Crisps",
        "description": "Paper-thin roasted seaweed sheets. Light, crispy, and full of ocean flavor.",
        "price": Decimal("5.50"),
        "image_url": "/static/images/products/seaweed-crisps.jpg",
        "category": "Snacks",
        "origin": "South Korea",
        "stock": 90,
    },
    {
        "name": "Yuzu Gummies",
        "description": "Tangy Japanese citrus gummies. Refreshing and uniquely flavored.",
        "price": Decimal("10.50"),
        "image_url": "/static/images/products/yuzu-gummies.jpg",
        "category": "Candy",
        "origin": "Japan",
        "stock": 45,
    },
    {
        "name": "Tamarind Candy",
        "description": "Sweet, sour, and spicy tamarind candy. A tropical delight!",
        "price": Decimal("6.99"),
        "image_url": "/static/images/products/tamarind-candy.jpg",
        "category": "Candy",
        "origin": "Thailand",
        "stock": 70,
    },
    {
        "name": "Pocky Matcha",
        "description": "Classic Japanese biscuit sticks coated with matcha chocolate.",
        "price": Decimal("4.50"),
        "image_url": "/static/images/products/pocky-matcha.jpg",
        "category": "Snacks",
        "origin": "Japan",
        "stock": 120,
    },
    {
        "name": "Dragon Fruit Chips",
        "description": "Freeze-dried dragon fruit chips. Colorful, crunchy, and naturally sweet.",
        "price": Decimal("11.99"),
        "image_url": "/static/images/products/dragon-fruit-chips.jpg",
        "category": "Snacks",
        "origin": "Vietnam",
        "stock": 35,
    },
    {
        "name": "Lychee Jelly",
        "description": "Delicate lychee-flavored jelly cups. Refreshing dessert.",
        "price": Decimal("8.50"),
        "image_url": "/static/images/products/lychee-jelly.jpg",
        "category": "Candy",
        "origin": "Taiwan",
        "stock": 55,
    },
    {
        "name": "Kimchi Crackers",
        "description": "Savory crackers with authentic kimchi flavor. Tangy and addictive.",
        "price": Decimal("7.99"),
        "image_url": "/static/images/products/kimchi-crackers.jpg",
        "category": "Snacks",
        "origin": "South Korea",
        "stock": 65,
    },
    {
        "name": "Mochi Ice Cream Mix",
        "description": "Assorted mochi ice cream balls. Chewy rice cake meets creamy ice cream.",
        "price": Decimal("19.99"),
        "image_url": "/static/images/products/mochi-ice-cream.jpg",
        "category": "Dessert",
        "origin": "Japan",
        "stock": 25,
    },
]


async def seed_products(db: AsyncSession) -> int:
    """Replace the whole catalog with SEED_PRODUCTS."""
    await db.execute(delete(Product))
    db.add_all([Product(**data) for data in SEED_PRODUCTS])
    await db.commit()
    logger.info(f"Seeded {len(SEED_PRODUCTS)} products")
    return len(SEED_PRODUCTS)


async def mark_featured(db: AsyncSession, count: int = 6) -> list[str]:
    result = await db.execute(
        select(Product).order_by(Product.created_at.desc(), Product.name).limit(count)
    )
    products = result.scalars().all()

    for product in products:
        product.is_featured = True
        logger.info(f"Marked '{product.name}' as featured")

    await db.commit()
    return [product.name for product in products]


async def main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        await seed_products(session)
        await mark_featured(session)

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    asyncio.run(main())
