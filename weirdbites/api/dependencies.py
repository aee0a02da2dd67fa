from fastapi import Request
import logging

from weirdbites.core.features import is_enabled
from weirdbites.services.cart import Cart, CartContextError
from weirdbites.services.cart_storage import CartStorage

logger = logging.getLogger(__name__)


async def provide_cart(request: Request) -> Cart:
    """
    Router-level dependency that builds the visitor's cart for this request.
    The cart snapshot is kept in the session; with cartPersistence off the cart
    only lives for the request.
    """
    storage = request.session if is_enabled("cartPersistence") else {}
    cart = Cart(CartStorage(storage))
    request.state.cart = cart
    return cart


def get_cart(request: Request) -> Cart:
    """
    Dependency to get the cart built by provide_cart.
    Fails loudly when the route's router does not provide one.
    """
    cart = getattr(request.state, "cart", None)

    if cart is None:
        raise CartContextError("get_cart must be used on a router with provide_cart in its dependencies")

    return cart
