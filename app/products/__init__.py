"""
Product creation package.
"""

from .errors import (
    ProductCreationError,
    MissingCredentialsError,
    RemoteValidationError,
    ReconciliationError,
    MalformedResponseError,
    OrchestrationDeadlineExceeded,
)
from .models import ProductSpec, OptionSpec, VariantSpec, ImageSpec, ProductStatus
from .reconciler import ReconciliationResult, split_variants, selected_options_map
from .remote import Location, RemoteProduct, RemoteVariant, RemoteOption
from .orchestrator import ProductOrchestrator, ProductCreationRun, OrchestrationState

__all__ = [
    "ProductCreationError",
    "MissingCredentialsError",
    "RemoteValidationError",
    "ReconciliationError",
    "MalformedResponseError",
    "OrchestrationDeadlineExceeded",
    "ProductSpec",
    "OptionSpec",
    "VariantSpec",
    "ImageSpec",
    "ProductStatus",
    "ReconciliationResult",
    "split_variants",
    "selected_options_map",
    "Location",
    "RemoteProduct",
    "RemoteVariant",
    "RemoteOption",
    "ProductOrchestrator",
    "ProductCreationRun",
    "OrchestrationState",
]
