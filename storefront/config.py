"""
Storefront configuration.

All settings come from the environment so the same code runs locally
(memory storage) and on Vercel (Upstash Redis).
"""

import os

# Persistence slot holding the JSON-serialized cart
CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "cart_v1")

# 0 disables expiry of the persisted cart
CART_TTL_SECONDS = int(os.environ.get("CART_TTL_SECONDS", "0"))

# Display currency; prices are integer minor units of this currency
CURRENCY = os.environ.get("CURRENCY", "SAR")

# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")


def redis_configured() -> bool:
    """True when both Upstash credentials are present."""
    return bool(UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN)


__all__ = [
    "CART_STORAGE_KEY",
    "CART_TTL_SECONDS",
    "CURRENCY",
    "UPSTASH_REDIS_REST_URL",
    "UPSTASH_REDIS_REST_TOKEN",
    "redis_configured",
]
