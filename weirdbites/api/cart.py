from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from decimal import Decimal
import logging

from weirdbites.db.session import get_db
from weirdbites.api.dependencies import provide_cart, get_cart
from weirdbites.core.features import is_enabled
from weirdbites.core.stock import is_stock_available
from weirdbites.schemas.cart import CartItemAdd, CartItemUpdate, CartItemResponse, CartResponse
from weirdbites.services.cart import Cart
from weirdbites.services.product import get_product, get_products_by_ids

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cart", tags=["cart"], dependencies=[Depends(provide_cart)])


async def get_cart_with_details(cart: Cart, db: AsyncSession) -> CartResponse:
    """Join cart lines with current product details. Used by web routes."""
    lines = cart.items

    if not lines:
        return CartResponse(lines=[], items=[], total_quantity=0, subtotal=Decimal("0.00"))

    products = {p.id: p for p in await get_products_by_ids(db, cart.product_ids)}

    items = []
    subtotal = Decimal("0.00")

    for line in lines:
        product = products.get(line.product_id)

        # Products removed from the catalog stay in the cart but are not shown
        if not product:
            continue

        line_subtotal = product.price * line.quantity
        items.append(CartItemResponse(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
            stock=product.stock,
            quantity=line.quantity,
            subtotal=line_subtotal
        ))
        subtotal += line_subtotal

    return CartResponse(
        lines=lines,
        items=items,
        total_quantity=cart.total_quantity,
        subtotal=subtotal
    )


async def validate_addable_product(db: AsyncSession, product_id: str):
    """
    Check that the cart is switched on and the product exists and is in stock.
    Raises HTTPException otherwise.
    """
    if not is_enabled("shoppingCart"):
        raise HTTPException(status_code=403, detail="Shopping cart is not available yet")

    product = await get_product(db, product_id)

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if not is_stock_available(product.stock):
        raise HTTPException(status_code=400, detail="Product is out of stock")

    return product


@router.get("", response_model=CartResponse)
async def read_cart(
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    """Get current shopping cart."""
    return await get_cart_with_details(cart, db)


@router.post("/add", response_model=CartResponse)
async def add_to_cart(
    item: CartItemAdd,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    """Add one unit of a product to the cart."""
    await validate_addable_product(db, item.product_id)

    cart.add_item(item.product_id)
    logger.info(f"Added to cart: product_id={item.product_id}")

    return await get_cart_with_details(cart, db)


@router.put("/update", response_model=CartResponse)
async def update_cart_item(
    item: CartItemUpdate,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    """Set a cart line's quantity. Products not in the cart are ignored."""
    cart.update_quantity(item.product_id, item.quantity)
    logger.info(f"Updated cart item: product_id={item.product_id}, quantity={item.quantity}")

    return await get_cart_with_details(cart, db)


@router.delete("/remove/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    cart: Cart = Depends(get_cart),
    db: AsyncSession = Depends(get_db)
):
    """Remove item from cart."""
    cart.remove_item(product_id)
    logger.info(f"Removed from cart: product_id={product_id}")

    return await get_cart_with_details(cart, db)


@router.post("/clear", response_model=CartResponse)
async def clear_cart(cart: Cart = Depends(get_cart)):
    """Clear entire cart."""
    cart.clear_cart()
    logger.info("Cart cleared")
    return CartResponse(lines=[], items=[], total_quantity=0, subtotal=Decimal("0.00"))
