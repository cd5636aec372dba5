"""
Shared test fixtures.
"""

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

from app.products import ProductSpec
from app.shopify import (
    PRODUCT_CREATE,
    PRODUCT_VARIANTS_BULK_CREATE,
    PRODUCT_VARIANTS_BULK_UPDATE,
    INVENTORY_SET_QUANTITIES,
    PRODUCT_DELETE,
)

SHOP_DOMAIN = "test.myshopify.com"
ACCESS_TOKEN = "access_token"
LOCATION_ID = "gid://shopify/Location/1"


# ===================
# RESPONSE BUILDERS
# ===================

def product_create_response(
    product_id: str = "gid://shopify/Product/1",
    title: str = "Test Product",
    selected_options: Optional[Dict[str, str]] = None,
    locations: Optional[List[dict]] = None,
    user_errors: Optional[List[dict]] = None,
) -> dict:
    """Envelope for productCreate as Shopify returns it."""
    if user_errors:
        return {"data": {"productCreate": {
            "product": None,
            "shop": {"locations": {"nodes": []}},
            "userErrors": user_errors,
        }}}

    if selected_options is None:
        selected_options = {"Color": "Red", "Size": "S"}
    if locations is None:
        locations = [{
            "id": LOCATION_ID,
            "name": "Main warehouse",
            "isActive": True,
            "isPrimary": True,
        }]

    number = product_id.rsplit("/", 1)[-1]
    return {"data": {"productCreate": {
        "product": {
            "id": product_id,
            "title": title,
            "status": "ACTIVE",
            "options": [
                {
                    "id": f"gid://shopify/ProductOption/{number}{i}",
                    "name": name,
                    "values": [value],
                    "optionValues": [
                        {"id": f"gid://shopify/ProductOptionValue/{number}{i}", "name": value}
                    ],
                }
                for i, (name, value) in enumerate(selected_options.items())
            ],
            "variants": {"edges": [{"node": {
                "id": f"gid://shopify/ProductVariant/{number}",
                "selectedOptions": [
                    {"name": name, "value": value}
                    for name, value in selected_options.items()
                ],
                "inventoryItem": {"id": f"gid://shopify/InventoryItem/{number}"},
            }}]},
        },
        "shop": {"locations": {"nodes": locations}},
        "userErrors": [],
    }}}


def bulk_create_response(user_errors: Optional[List[dict]] = None) -> dict:
    return {"data": {"productVariantsBulkCreate": {
        "productVariants": [],
        "userErrors": user_errors or [],
    }}}


def inventory_set_response(user_errors: Optional[List[dict]] = None) -> dict:
    return {"data": {"inventorySetQuantities": {
        "inventoryAdjustmentGroup": {"reason": "correction", "changes": []},
        "userErrors": user_errors or [],
    }}}


def bulk_update_response(
    product_id: str = "gid://shopify/Product/1",
    title: str = "Test Product",
    user_errors: Optional[List[dict]] = None,
) -> dict:
    return {"data": {"productVariantsBulkUpdate": {
        "product": None if user_errors else {"id": product_id, "title": title},
        "userErrors": user_errors or [],
    }}}


def product_delete_response(product_id: str = "gid://shopify/Product/1") -> dict:
    return {"data": {"productDelete": {
        "deletedProductId": product_id,
        "userErrors": [],
    }}}


# ===================
# RECORDING CLIENT
# ===================

@dataclass
class RecordedCall:
    query: str
    variables: Any
    shop_domain: str
    access_token: str


Response = Union[dict, Exception, Callable[[Any], dict]]


class RecordingShopifyClient:
    """
    Stands in for ShopifyClient. Records every execute() call and answers
    with the response registered for the operation document.
    """

    def __init__(self, responses: Optional[Dict[str, Response]] = None):
        self.calls: List[RecordedCall] = []
        self.responses: Dict[str, Response] = {
            PRODUCT_CREATE: product_create_response(),
            PRODUCT_VARIANTS_BULK_CREATE: bulk_create_response(),
            INVENTORY_SET_QUANTITIES: inventory_set_response(),
            PRODUCT_VARIANTS_BULK_UPDATE: bulk_update_response(),
            PRODUCT_DELETE: product_delete_response(),
        }
        if responses:
            self.responses.update(responses)

    async def execute(self, query, variables, shop_domain, access_token):
        self.calls.append(RecordedCall(query, variables, shop_domain, access_token))
        response = self.responses[query]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(variables)
        return response

    def calls_to(self, query: str) -> List[RecordedCall]:
        return [call for call in self.calls if call.query == query]

    async def close(self) -> None:
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def sequential_products() -> Callable[[Any], dict]:
    """productCreate responder that hands out a new product id per call."""
    counter = itertools.count(1)

    def respond(variables):
        return product_create_response(product_id=f"gid://shopify/Product/{next(counter)}")

    return respond


# ===================
# FIXTURES
# ===================

@pytest.fixture
def product_data() -> dict:
    """T-shirt with a default variant (Red/S) and one more (Blue/S)."""
    return {
        "title": "Test Product",
        "description": "This is a test product description.",
        "vendor": "Test Vendor",
        "product_type": "Apparel",
        "status": "active",
        "options": [
            {"name": "Color", "values": ["Red", "Blue"]},
            {"name": "Size", "values": ["S"]},
        ],
        "variants": [
            {
                "options": {"Size": "S", "Color": "Red"},
                "price": 19.99,
                "sku": "TSHIRT-S-RED",
                "inventory_quantity": 100,
            },
            {
                "options": {"Size": "S", "Color": "Blue"},
                "price": 19.99,
                "sku": "TSHIRT-S-BLUE",
                "inventory_quantity": 50,
            },
        ],
        "images": [
            {
                "src": "https://cdn.shopify.com/s/files/1/0533/2089/files/placeholder-images-image_large.png",
                "alt": "Product Image",
            }
        ],
    }


@pytest.fixture
def product_spec(product_data) -> ProductSpec:
    return ProductSpec.model_validate(product_data)


@pytest.fixture
def recording_client() -> RecordingShopifyClient:
    return RecordingShopifyClient()
