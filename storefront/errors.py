"""
Storefront errors and user-facing messages.

Message strings live here so the UI layer and tests share one source.
"""

# Cart notices
CART_EMPTY_NOTICE = "Your cart is empty."
ERROR_CART_EMPTY = "Your cart is empty. Add a product first."

# Storage errors
ERROR_MALFORMED_CART = "Persisted cart is malformed"


class StorefrontError(Exception):
    """Base class for storefront errors."""


class EmptyCartError(StorefrontError):
    """Checkout was attempted with nothing in the cart."""

    def __init__(self, message: str = ERROR_CART_EMPTY):
        super().__init__(message)
        self.message = message


class MalformedPersistedStateError(StorefrontError, ValueError):
    """
    Persisted cart could not be decoded.

    Raised by the decoder and recovered inside CartStore.load(), which resets
    the cart to empty. Never surfaced to the user.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"{ERROR_MALFORMED_CART} ({key}): {reason}")
        self.key = key
        self.reason = reason


__all__ = [
    "CART_EMPTY_NOTICE",
    "ERROR_CART_EMPTY",
    "ERROR_MALFORMED_CART",
    "StorefrontError",
    "EmptyCartError",
    "MalformedPersistedStateError",
]
