"""Cart subsystem for the coaching & HR-products site."""
from storefront.cart import CartLine, CartStore, CartView
from storefront.catalog import Catalog, Product, default_catalog
from storefront.errors import EmptyCartError, MalformedPersistedStateError, StorefrontError
from storefront.storage import KeyValueStorage, MemoryStorage, RedisStorage, create_storage

__all__ = [
    "CartLine",
    "CartStore",
    "CartView",
    "Catalog",
    "Product",
    "default_catalog",
    "EmptyCartError",
    "MalformedPersistedStateError",
    "StorefrontError",
    "KeyValueStorage",
    "MemoryStorage",
    "RedisStorage",
    "create_storage",
]
