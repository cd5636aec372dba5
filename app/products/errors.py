"""
Errors raised while creating a product on Shopify.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .orchestrator import ProductCreationRun


class ProductCreationError(Exception):
    """Base exception for product creation failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.run: Optional["ProductCreationRun"] = None


class MissingCredentialsError(ProductCreationError):
    """Shop domain or access token was not supplied."""

    status_code = 400

    def __init__(self, message: str = "Missing Shopify credentials in headers."):
        super().__init__(message)


class RemoteValidationError(ProductCreationError):
    """Shopify answered with userErrors."""

    def __init__(self, messages: List[str], step: Optional[str] = None):
        super().__init__(f"Shopify error: {', '.join(messages)}")
        self.messages = messages
        self.step = step


class ReconciliationError(ProductCreationError):
    """No requested variant matches the variant Shopify created."""
    pass


class MalformedResponseError(ProductCreationError):
    """A Shopify response is missing a field the next step needs."""
    pass


class OrchestrationDeadlineExceeded(ProductCreationError):
    """The caller's deadline passed between two steps."""
    pass
