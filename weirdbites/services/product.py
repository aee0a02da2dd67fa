import logging
from typing import Optional, Sequence

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from weirdbites.db.models import Product
from weirdbites.core.pagination import PaginationMeta, calculate_pagination_offset, calculate_pagination_meta
from weirdbites.schemas.product import ProductResponse, CartProductResponse, CategoryResponse

logger = logging.getLogger(__name__)


async def list_products(
    db: AsyncSession,
    page: int = 1,
    page_size: int = 12,
    category: Optional[str] = None
) -> tuple[list[ProductResponse], PaginationMeta]:
    """
    One page of products ordered by name, optionally limited to a category.
    Returns the products together with pagination metadata.
    """
    skip, take = calculate_pagination_offset(page, page_size)

    query = select(Product)
    count_query = select(func.count(Product.id))

    if category:
        query = query.where(Product.category == category)
        count_query = count_query.where(Product.category == category)

    count_result = await db.execute(count_query)
    total_items = count_result.scalar()

    result = await db.execute(
        query.order_by(Product.name).offset(skip).limit(take)
    )
    products = [ProductResponse.model_validate(p) for p in result.scalars().all()]

    logger.debug(f"Listed {len(products)} of {total_items} products (page={page}, category={category})")

    return products, calculate_pagination_meta(page, page_size, total_items)


async def get_product(db: AsyncSession, product_id: str) -> Optional[ProductResponse]:
    result = await db.execute(select(Product).where(Product.id == product_id))
    product = result.scalar_one_or_none()

    if not product:
        return None

    return ProductResponse.model_validate(product)


async def get_products_by_ids(db: AsyncSession, product_ids: Sequence[str]) -> list[CartProductResponse]:
    """Bulk lookup used to display cart contents. Unknown ids are skipped."""
    if not product_ids:
        return []

    result = await db.execute(
        select(Product).where(Product.id.in_(list(product_ids)))
    )
    return [CartProductResponse.model_validate(p) for p in result.scalars().all()]


async def list_categories(db: AsyncSession) -> list[CategoryResponse]:
    result = await db.execute(
        select(Product.category, func.count(Product.id))
        .group_by(Product.category)
        .order_by(Product.category)
    )

    return [CategoryResponse(name=name, count=count) for name, count in result.all()]


async def get_featured_products(db: AsyncSession, limit: int = 6) -> list[ProductResponse]:
    result = await db.execute(
        select(Product)
        .where(Product.is_featured == True)
        .order_by(Product.name)
        .limit(limit)
    )
    return [ProductResponse.model_validate(p) for p in result.scalars().all()]
