from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional, List
import logging

from weirdbites.db.session import get_db
from weirdbites.schemas.product import ProductResponse, ProductListResponse, BulkProductsResponse, CategoryResponse
from weirdbites.services.product import list_products, get_product, get_products_by_ids, list_categories
from weirdbites.core.config import settings
from weirdbites.core.pagination import validate_pagination_params
from weirdbites.core.responses import api_error

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def get_products(
    limit: Optional[str] = None,
    page: Optional[str] = None,
    category: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """
    List products ordered by name.

    Query Parameters:
    - limit: products per page (default 12, 1..100)
    - page: 1-indexed page (default 1)
    - category: exact category name
    """
    page_size = settings.DEFAULT_PAGE_SIZE
    if limit:
        try:
            page_size = int(limit)
        except ValueError:
            page_size = 0
        if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
            return api_error(f"Invalid limit parameter. Must be between 1 and {settings.MAX_PAGE_SIZE}.", 400)

    page_number = 1
    if page:
        try:
            page_number = int(page)
        except ValueError:
            page_number = 0

    error = validate_pagination_params(page_number, page_size, settings.MAX_PAGE_SIZE)
    if error:
        return api_error(error, 400)

    products, pagination = await list_products(
        db, page=page_number, page_size=page_size, category=category or None
    )

    return ProductListResponse(products=products, pagination=pagination)


@router.get("/categories", response_model=List[CategoryResponse])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Categories with their product counts."""
    return await list_categories(db)


@router.get("/bulk", response_model=BulkProductsResponse)
async def get_bulk_products(
    ids: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """
    Fetch several products by id for cart display.

    GET /api/products/bulk?ids=id1,id2,id3
    Ids are trimmed and deduplicated; at most MAX_BULK_PRODUCTS per call.
    """
    if not ids or not ids.strip():
        return api_error("Missing 'ids' query parameter", 400)

    product_ids = list(dict.fromkeys(pid.strip() for pid in ids.split(",") if pid.strip()))

    if len(product_ids) > settings.MAX_BULK_PRODUCTS:
        return api_error(f"Maximum {settings.MAX_BULK_PRODUCTS} products can be fetched at once", 400)

    products = await get_products_by_ids(db, product_ids)
    return BulkProductsResponse(products=products)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product_detail(
    product_id: str,
    db: AsyncSession = Depends(get_db)
):
    product = await get_product(db, product_id)

    if not product:
        logger.info(f"Product not found: {product_id}")
        return api_error("Product not found", 404, productId=product_id)

    return product
