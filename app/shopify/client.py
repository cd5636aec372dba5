"""
Shopify GraphQL Admin API client.
"""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class ShopifyClientError(Exception):
    """Base exception for Shopify client errors."""
    pass


class TransportError(ShopifyClientError):
    """Network or HTTP level failure talking to Shopify."""

    status_code = 500

    def __init__(
        self,
        message: str,
        http_status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.http_status = http_status
        self.body = body


class ShopifyAuthError(TransportError):
    """Authentication error."""
    pass


class ShopifyRateLimitError(TransportError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[float] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message, http_status=429, body=body)
        self.retry_after = retry_after


def normalize_shop_domain(shop_domain: str) -> str:
    """Strip scheme and trailing slash from a shop domain."""
    domain = shop_domain.strip()
    if domain.startswith("https://"):
        domain = domain[8:]
    elif domain.startswith("http://"):
        domain = domain[7:]
    return domain.rstrip("/")


class ShopifyClient:
    """
    Async HTTP client for Shopify GraphQL Admin API.

    One instance is shared across shops: the shop domain and access token
    are passed on every call, so the underlying connection pool is reused.
    Each call is exactly one round trip. Nothing is retried.
    """

    API_VERSION = "2025-07"

    def __init__(
        self,
        api_version: Optional[str] = None,
        timeout: float = 60.0,
        connect_timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Shopify client.

        Args:
            api_version: Admin API version, defaults to API_VERSION
            timeout: Per-call timeout in seconds
            connect_timeout: Connect timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_version = api_version or self.API_VERSION
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def graphql_url(self, shop_domain: str) -> str:
        """Admin GraphQL endpoint for a shop."""
        domain = normalize_shop_domain(shop_domain)
        return f"https://{domain}/admin/api/{self.api_version}/graphql.json"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]],
        shop_domain: str,
        access_token: str,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query/mutation against one shop.

        Args:
            query: GraphQL query or mutation string
            variables: Variables for the operation
            shop_domain: Store domain (e.g., "mystore.myshopify.com")
            access_token: Admin API access token

        Returns:
            The decoded GraphQL response envelope ("data", "extensions", ...).
            userErrors inside "data" are left for the caller.

        Raises:
            ShopifyAuthError: If authentication fails
            ShopifyRateLimitError: If Shopify throttled the call
            TransportError: For any other network, HTTP or GraphQL failure
        """
        if not shop_domain or not access_token:
            raise ValueError("shop_domain and access_token are required")

        client = await self._get_client()
        url = self.graphql_url(shop_domain)
        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        try:
            response = await client.post(
                url,
                json=payload,
                headers={"X-Shopify-Access-Token": access_token},
            )
        except httpx.RequestError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"Shopify API request failed: {e}") from e

        body = response.text
        logger.debug(f"Shopify response ({response.status_code}): {body}")

        # Handle HTTP errors
        if response.status_code in (401, 403):
            raise ShopifyAuthError(
                f"Authentication failed for {normalize_shop_domain(shop_domain)}",
                http_status=response.status_code,
                body=body,
            )

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise ShopifyRateLimitError(
                "Rate limit exceeded",
                retry_after=float(retry_after) if retry_after else None,
                body=body,
            )

        if response.is_error:
            logger.error(f"Shopify API error {response.status_code}: {body}")
            raise TransportError(
                f"Shopify API request failed: HTTP {response.status_code}: {body}",
                http_status=response.status_code,
                body=body,
            )

        # Parse response
        try:
            result = response.json()
        except ValueError as e:
            raise TransportError(
                f"Shopify API returned invalid JSON: {body}",
                http_status=response.status_code,
                body=body,
            ) from e

        if not isinstance(result, dict):
            raise TransportError(
                f"Shopify API returned unexpected payload: {body}",
                http_status=response.status_code,
                body=body,
            )

        # Check for GraphQL errors
        if result.get("errors"):
            errors = result["errors"]
            if isinstance(errors, list):
                error_messages = [
                    e.get("message", str(e)) if isinstance(e, dict) else str(e)
                    for e in errors
                ]
            else:
                error_messages = [str(errors)]

            if any("throttl" in msg.lower() for msg in error_messages):
                raise ShopifyRateLimitError(
                    f"GraphQL throttled: {error_messages}", body=body
                )

            raise TransportError(
                f"GraphQL errors: {error_messages}",
                http_status=response.status_code,
                body=body,
            )

        # Log rate limit status if available
        cost = (result.get("extensions") or {}).get("cost")
        if isinstance(cost, dict):
            throttle = cost.get("throttleStatus") or {}
            available = throttle.get("currentlyAvailable")
            if available is not None and available < 100:
                logger.warning(
                    f"Low rate limit points: {available} available"
                )

        return result

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
