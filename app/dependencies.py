"""
FastAPI dependency injection.
One shared Shopify client, created on startup and closed on shutdown.
"""

from typing import Optional

from .config import settings
from .products import ProductOrchestrator
from .shopify import ShopifyClient


# Global instance (initialized on startup)
_client: Optional[ShopifyClient] = None


async def init_dependencies():
    """Initialize global dependencies. Called on app startup."""
    global _client

    _client = ShopifyClient(
        api_version=settings.shopify_api_version,
        timeout=settings.request_timeout,
        connect_timeout=settings.connect_timeout,
    )


async def close_dependencies():
    """Close global dependencies. Called on app shutdown."""
    global _client
    if _client:
        await _client.close()
        _client = None


def get_shopify_client() -> ShopifyClient:
    """Get the shared Shopify client."""
    if _client is None:
        raise RuntimeError("Shopify client not initialized")
    return _client


def get_orchestrator() -> ProductOrchestrator:
    """Build an orchestrator around the shared client."""
    return ProductOrchestrator(
        get_shopify_client(),
        delete_on_failure=settings.delete_on_failure,
    )
