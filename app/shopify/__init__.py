"""
Shopify API module.
"""

from app.shopify.client import (
    ShopifyClient,
    ShopifyClientError,
    TransportError,
    ShopifyAuthError,
    ShopifyRateLimitError,
    normalize_shop_domain,
)
from app.shopify.mutations import (
    PRODUCT_CREATE,
    PRODUCT_VARIANTS_BULK_CREATE,
    PRODUCT_VARIANTS_BULK_UPDATE,
    INVENTORY_SET_QUANTITIES,
    PRODUCT_DELETE,
)

__all__ = [
    "ShopifyClient",
    "ShopifyClientError",
    "TransportError",
    "ShopifyAuthError",
    "ShopifyRateLimitError",
    "normalize_shop_domain",
    "PRODUCT_CREATE",
    "PRODUCT_VARIANTS_BULK_CREATE",
    "PRODUCT_VARIANTS_BULK_UPDATE",
    "INVENTORY_SET_QUANTITIES",
    "PRODUCT_DELETE",
]
