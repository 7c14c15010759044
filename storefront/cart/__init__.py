"""Cart package: projection models and the cart store."""
from .models import CartLine, CartView
from .service import CartStore, CheckoutHandler, DisplayCallback, decode_cart_state

__all__ = [
    "CartLine",
    "CartView",
    "CartStore",
    "CheckoutHandler",
    "DisplayCallback",
    "decode_cart_state",
]
