from fastapi import APIRouter, Request, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import logging

from weirdbites.db.session import get_db
from weirdbites.api.dependencies import provide_cart, get_cart
from weirdbites.api.cart import get_cart_with_details, validate_addable_product
from weirdbites.core.config import settings, BASE_DIR
from weirdbites.core.features import is_enabled, with_feature, filter_by_feature
from weirdbites.core.pagination import parse_page_params, calculate_pagination_meta
from weirdbites.core.stock import get_stock_status, get_stock_message, is_stock_available
from weirdbites.services.cart import Cart
from weirdbites.services.product import list_products, get_product, list_categories, get_featured_products

logger = logging.getLogger(__name__)
router = APIRouter(tags=["web"], dependencies=[Depends(provide_cart)])

NAV_LINKS = [
    {"label": "Home", "href": "/"},
    {"label": "Products", "href": "/products", "feature": "productListing"},
    {"label": "Cart", "href": "/cart", "feature": "shoppingCart", "is_cart": True},
]

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.globals["shop_name"] = settings.SHOP_NAME
templates.env.globals["nav_links"] = lambda: filter_by_feature(NAV_LINKS)
templates.env.globals["feature"] = is_enabled
templates.env.globals["stock_status"] = get_stock_status
templates.env.globals["stock_message"] = get_stock_message
templates.env.globals["stock_available"] = is_stock_available

TOAST_SESSION_KEY = "toast"


def flash_toast(request: Request, message: str, level: str = "success"):
    """Queue a one-shot notification for the next rendered page."""
    request.session[TOAST_SESSION_KEY] = {"message": message, "level": level}


def safe_next_url(next_url: Optional[str], default: str = "/cart") -> str:
    # Only same-site paths
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return default


# Helper to get common data for all templates
def get_base_context(request: Request, cart: Cart) -> dict:
    return {
        "request": request,
        "shop_name": settings.SHOP_NAME,
        "cart_count": cart.total_quantity,
        "toast": request.session.pop(TOAST_SESSION_KEY, None),
    }


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    base_context = get_base_context(request, cart)
    featured = await get_featured_products(db, limit=settings.FEATURED_PRODUCTS_LIMIT)

    return templates.TemplateResponse(request, "home.html", {
        **base_context,
        "featured_products": featured
    })


@router.get("/products", response_class=HTMLResponse)
async def products_page(
    request: Request,
    page: Optional[str] = None,
    pageSize: Optional[str] = None,
    category: Optional[str] = None,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    base_context = get_base_context(request, cart)

    page_number, page_size = parse_page_params(
        page, pageSize, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE
    )
    page_number, page_size = with_feature(
        "productPagination",
        lambda: (page_number, page_size),
        lambda: (1, settings.MAX_PAGE_SIZE)
    )

    # Handle empty category strings
    current_category = None
    if is_enabled("productFiltering") and category and category.strip():
        current_category = category.strip()

    error = None
    try:
        products, pagination = await list_products(
            db, page=page_number, page_size=page_size, category=current_category
        )
        categories = await list_categories(db) if is_enabled("productFiltering") else []
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products: {str(e)}")
        products, categories = [], []
        pagination = calculate_pagination_meta(page_number, page_size, 0)
        error = "Failed to load products"

    return templates.TemplateResponse(request, "products.html", {
        **base_context,
        "products": products,
        "pagination": pagination,
        "categories": categories,
        "current_category": current_category,
        "error": error
    })


@router.get("/products/{product_id}", response_class=HTMLResponse)
async def product_detail(
    request: Request,
    product_id: str,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    base_context = get_base_context(request, cart)
    product = await get_product(db, product_id)

    if not product:
        return templates.TemplateResponse(request, "errors/404.html", {
            **base_context,
            "message": "Product not found"
        }, status_code=404)

    return templates.TemplateResponse(request, "product_detail.html", {
        **base_context,
        "product": product
    })


@router.get("/cart", response_class=HTMLResponse)
async def view_cart(
    request: Request,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    base_context = get_base_context(request, cart)
    cart_details = await get_cart_with_details(cart, db)

    return templates.TemplateResponse(request, "cart.html", {
        **base_context,
        "cart": cart_details
    })


@router.post("/cart/add")
async def add_to_cart_form(
    request: Request,
    product_id: str = Form(...),
    next: str = Form("/cart"),
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    redirect_url = safe_next_url(next)

    try:
        product = await validate_addable_product(db, product_id)
    except HTTPException as e:
        flash_toast(request, e.detail, level="error")
        return RedirectResponse(url=redirect_url, status_code=303)

    cart.add_item(product_id)
    logger.info(f"Added to cart: product_id={product_id}")

    # Feedback is the page's job, not the cart's
    flash_toast(request, f"{product.name} added to cart")
    return RedirectResponse(url=redirect_url, status_code=303)


@router.post("/cart/update")
async def update_cart_form(
    product_id: str = Form(...),
    quantity: int = Form(...),
    cart: Cart = Depends(get_cart)
):
    cart.update_quantity(product_id, quantity)
    logger.info(f"Updated cart item: product_id={product_id}, quantity={quantity}")
    return RedirectResponse(url="/cart", status_code=303)


@router.post("/cart/remove")
async def remove_from_cart_form(
    product_id: str = Form(...),
    cart: Cart = Depends(get_cart)
):
    cart.remove_item(product_id)
    logger.info(f"Removed from cart: product_id={product_id}")
    return RedirectResponse(url="/cart", status_code=303)


@router.post("/cart/clear")
async def clear_cart_form(cart: Cart = Depends(get_cart)):
    cart.clear_cart()
    logger.info("Cart cleared")
    return RedirectResponse(url="/cart", status_code=303)
