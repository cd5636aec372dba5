"""
Product creation on Shopify.

productCreate always creates one default variant, so creating a product
with N variants takes five dependent calls:

1. productCreate with options and media
2. match the requested variant Shopify already created
3. productVariantsBulkCreate for the other variants
4. inventorySetQuantities for the default variant
5. productVariantsBulkUpdate to set the default variant's SKU and price

A failure at any step stops the run. Nothing is retried, and unless
delete_on_failure is set the partially created product stays on the store.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..shopify import (
    ShopifyClient,
    ShopifyClientError,
    normalize_shop_domain,
    PRODUCT_CREATE,
    PRODUCT_VARIANTS_BULK_CREATE,
    PRODUCT_VARIANTS_BULK_UPDATE,
    INVENTORY_SET_QUANTITIES,
    PRODUCT_DELETE,
)
from .errors import (
    MissingCredentialsError,
    OrchestrationDeadlineExceeded,
    ProductCreationError,
)
from .models import ProductSpec, format_price
from .reconciler import ReconciliationResult, selected_options_map, split_variants
from .remote import (
    Location,
    RemoteProduct,
    first_active_location,
    mutation_payload,
    parse_product,
    updated_product,
)

logger = logging.getLogger(__name__)


class OrchestrationState(str, Enum):
    """Progress of a single product creation."""
    CREATED = "created"
    PRODUCT_CREATED = "product_created"
    RECONCILED = "reconciled"
    VARIANTS_BULK_CREATED = "variants_bulk_created"
    INVENTORY_SET = "inventory_set"
    VARIANT_UPDATED = "variant_updated"
    FAILED = "failed"


@dataclass
class ProductCreationRun:
    """State of one create_product call. Attached to errors as `run`."""

    shop_domain: str
    state: OrchestrationState = OrchestrationState.CREATED
    history: List[OrchestrationState] = field(
        default_factory=lambda: [OrchestrationState.CREATED]
    )
    product: Optional[RemoteProduct] = None
    location: Optional[Location] = None
    reconciliation: Optional[ReconciliationResult] = None
    result: Optional[Dict[str, Any]] = None
    failed_at: Optional[OrchestrationState] = None
    rolled_back: bool = False

    def advance(self, state: OrchestrationState) -> None:
        self.state = state
        self.history.append(state)

    def fail(self) -> None:
        self.failed_at = self.state
        self.advance(OrchestrationState.FAILED)

    @property
    def product_id(self) -> Optional[str]:
        return self.product.id if self.product else None


class ProductOrchestrator:
    """
    Creates products on Shopify through the GraphQL Admin API.

    The client is injected and may be shared between orchestrators and
    concurrent calls; the orchestrator itself keeps no state between calls.
    """

    def __init__(self, client: ShopifyClient, delete_on_failure: bool = False):
        """
        Args:
            client: Shared Shopify GraphQL client
            delete_on_failure: Delete the created product if a later step fails
        """
        self.client = client
        self.delete_on_failure = delete_on_failure

    async def create_product(
        self,
        spec: ProductSpec,
        shop_domain: str,
        access_token: str,
        deadline: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Create a product with all of its variants.

        Calling this twice with the same spec creates two products.

        Args:
            spec: Validated product description
            shop_domain: Store domain (e.g., "mystore.myshopify.com")
            access_token: Admin API access token
            deadline: Optional time.monotonic() value; checked before each call

        Returns:
            Product fragment (id, title) from the final variant update

        Raises:
            MissingCredentialsError: Before any call if credentials are empty
            RemoteValidationError: If a step returned userErrors
            ReconciliationError: If no variant matches Shopify's default one
            MalformedResponseError: If a response lacks a required field
            OrchestrationDeadlineExceeded: If the deadline passed
            TransportError: If a call failed at network/HTTP level
        """
        if not shop_domain or not access_token:
            raise MissingCredentialsError()

        run = ProductCreationRun(shop_domain=normalize_shop_domain(shop_domain))
        logger.info(
            f"Creating product '{spec.title}' on {run.shop_domain} "
            f"with {len(spec.variants)} variants"
        )

        try:
            # Step 1: Create the product
            self._check_deadline(deadline, "productCreate")
            await self._create_product(run, spec, shop_domain, access_token)

            # Step 2: Match the requested variants against the default variant
            run.reconciliation = split_variants(
                spec.variants,
                selected_options_map(run.product.default_variant),
            )
            run.advance(OrchestrationState.RECONCILED)
            logger.info(
                f"Default variant matches SKU {run.reconciliation.matched.sku}, "
                f"{len(run.reconciliation.remainder)} variants remaining"
            )

            # Step 3: Create the remaining variants
            self._check_deadline(deadline, "productVariantsBulkCreate")
            await self._bulk_create_remainder(run, shop_domain, access_token)

            # Step 4: Stock for the default variant
            self._check_deadline(deadline, "inventorySetQuantities")
            await self._set_inventory(run, shop_domain, access_token)

            # Step 5: SKU and price for the default variant
            self._check_deadline(deadline, "productVariantsBulkUpdate")
            await self._update_default_variant(run, shop_domain, access_token)

        except (ProductCreationError, ShopifyClientError) as e:
            run.fail()
            e.run = run
            logger.error(
                f"Product creation failed at '{run.failed_at.value}' "
                f"on {run.shop_domain}: {e}"
            )
            if run.product is not None:
                if self.delete_on_failure:
                    await self._delete_product(run, shop_domain, access_token)
                else:
                    logger.warning(
                        f"Product {run.product_id} was left partially created"
                    )
            raise

        logger.info(f"Created product {run.product_id} on {run.shop_domain}")
        return run.result

    def _check_deadline(self, deadline: Optional[float], next_step: str) -> None:
        if deadline is not None and time.monotonic() >= deadline:
            raise OrchestrationDeadlineExceeded(
                f"Deadline exceeded before {next_step}"
            )

    async def _create_product(
        self,
        run: ProductCreationRun,
        spec: ProductSpec,
        shop_domain: str,
        access_token: str,
    ) -> None:
        response = await self.client.execute(
            PRODUCT_CREATE,
            {"input": spec.product_input(), "media": spec.media_input()},
            shop_domain,
            access_token,
        )
        payload = mutation_payload(response, "productCreate")

        run.product = parse_product(payload)
        run.location = first_active_location(payload)
        run.advance(OrchestrationState.PRODUCT_CREATED)
        logger.info(
            f"Created product {run.product.id}, "
            f"stock location {run.location.id}"
        )

    async def _bulk_create_remainder(
        self,
        run: ProductCreationRun,
        shop_domain: str,
        access_token: str,
    ) -> None:
        variants = [
            {
                "inventoryItem": {"sku": variant.sku},
                "inventoryQuantities": {
                    "availableQuantity": variant.inventory_quantity,
                    "locationId": run.location.id,
                },
                "price": format_price(variant.price),
                "optionValues": variant.option_values_input(),
            }
            for variant in run.reconciliation.remainder
        ]

        response = await self.client.execute(
            PRODUCT_VARIANTS_BULK_CREATE,
            {"productId": run.product.id, "variants": variants},
            shop_domain,
            access_token,
        )
        mutation_payload(response, "productVariantsBulkCreate")

        run.advance(OrchestrationState.VARIANTS_BULK_CREATED)
        logger.debug(f"Created {len(variants)} variants for {run.product.id}")

    async def _set_inventory(
        self,
        run: ProductCreationRun,
        shop_domain: str,
        access_token: str,
    ) -> None:
        matched = run.reconciliation.matched
        response = await self.client.execute(
            INVENTORY_SET_QUANTITIES,
            {
                "input": {
                    "ignoreCompareQuantity": True,
                    "reason": "correction",
                    "name": "available",
                    "quantities": [
                        {
                            "quantity": matched.inventory_quantity,
                            "inventoryItemId": run.product.default_variant.inventory_item_id,
                            "locationId": run.location.id,
                        }
                    ],
                }
            },
            shop_domain,
            access_token,
        )
        mutation_payload(response, "inventorySetQuantities")

        run.advance(OrchestrationState.INVENTORY_SET)
        logger.debug(
            f"Set {matched.inventory_quantity} available for {matched.sku}"
        )

    async def _update_default_variant(
        self,
        run: ProductCreationRun,
        shop_domain: str,
        access_token: str,
    ) -> None:
        matched = run.reconciliation.matched
        response = await self.client.execute(
            PRODUCT_VARIANTS_BULK_UPDATE,
            {
                "productId": run.product.id,
                "variants": [
                    {
                        "id": run.product.default_variant.id,
                        "inventoryItem": {"sku": matched.sku, "tracked": True},
                        "price": format_price(matched.price),
                        "optionValues": matched.option_values_input(),
                    }
                ],
            },
            shop_domain,
            access_token,
        )
        payload = mutation_payload(response, "productVariantsBulkUpdate")

        run.result = updated_product(payload)
        run.advance(OrchestrationState.VARIANT_UPDATED)

    async def _delete_product(
        self,
        run: ProductCreationRun,
        shop_domain: str,
        access_token: str,
    ) -> None:
        """Best-effort removal of a partially created product."""
        try:
            response = await self.client.execute(
                PRODUCT_DELETE,
                {"input": {"id": run.product_id}},
                shop_domain,
                access_token,
            )
            mutation_payload(response, "productDelete")
        except (ProductCreationError, ShopifyClientError) as e:
            logger.error(f"Could not delete product {run.product_id}: {e}")
            return

        run.rolled_back = True
        logger.info(f"Deleted partially created product {run.product_id}")
