"""Pytest configuration and fixtures"""
import json
import os
import pytest
from unittest.mock import Mock

# Keep tests off any real Redis
os.environ.pop("UPSTASH_REDIS_REST_URL", None)
os.environ.pop("UPSTASH_REDIS_REST_TOKEN", None)

from storefront.cart import CartStore
from storefront.catalog import default_catalog
from storefront.storage import MemoryStorage


@pytest.fixture
def catalog():
    """Site catalog (six HR products)"""
    return default_catalog()


@pytest.fixture
def memory_storage():
    """Empty in-memory storage slot"""
    return MemoryStorage()


@pytest.fixture
def display():
    """Display callback recording every rendered view"""
    return Mock()


@pytest.fixture
def store(memory_storage, catalog, display):
    """Loaded cart store over empty storage"""
    cart = CartStore(memory_storage, catalog, display=display)
    cart.load()
    display.reset_mock()
    return cart


@pytest.fixture
def make_store(catalog):
    """Factory: cart store hydrated from a given persisted mapping or raw string"""
    def _make(persisted=None, display=None):
        initial = {}
        if persisted is not None:
            initial["cart_v1"] = persisted if isinstance(persisted, str) else json.dumps(persisted)
        storage = MemoryStorage(initial)
        cart = CartStore(storage, catalog, display=display)
        cart.load()
        return cart, storage

    return _make


@pytest.fixture
def mock_redis():
    """Mock Upstash Redis client"""
    client = Mock()
    client.get.return_value = None
    client.set.return_value = True
    client.delete.return_value = 1
    return client
