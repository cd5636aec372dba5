"""
Parsing of Shopify mutation responses.

Every field is checked before use; anything missing raises
MalformedResponseError instead of a KeyError/IndexError deep in a step.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import MalformedResponseError, RemoteValidationError


@dataclass
class RemoteOptionValue:
    id: str
    name: str


@dataclass
class RemoteOption:
    id: str
    name: str
    values: List[str] = field(default_factory=list)
    option_values: List[RemoteOptionValue] = field(default_factory=list)


@dataclass
class RemoteVariant:
    """A variant as created by Shopify."""

    id: str
    selected_options: Dict[str, str]
    inventory_item_id: str


@dataclass
class RemoteProduct:
    """Product returned by productCreate."""

    id: str
    title: str
    status: Optional[str]
    options: List[RemoteOption]
    variants: List[RemoteVariant]

    @property
    def default_variant(self) -> RemoteVariant:
        """The variant Shopify created along with the product."""
        if not self.variants:
            raise MalformedResponseError(
                f"Product {self.id} was created without a default variant"
            )
        return self.variants[0]


@dataclass
class Location:
    """A stock location of the shop."""

    id: str
    name: Optional[str] = None
    is_active: bool = True
    is_primary: bool = False


def _require(container: Any, key: str, what: str) -> Any:
    """Return container[key], raising MalformedResponseError if absent."""
    if not isinstance(container, dict) or container.get(key) is None:
        raise MalformedResponseError(f"Shopify response is missing {what}")
    return container[key]


def _require_list(container: Any, key: str, what: str) -> list:
    value = _require(container, key, what)
    if not isinstance(value, list):
        raise MalformedResponseError(f"Shopify response has invalid {what}")
    return value


def mutation_payload(response: Dict[str, Any], mutation: str) -> Dict[str, Any]:
    """
    Extract the payload of one mutation and check its userErrors.

    Args:
        response: Decoded GraphQL envelope from ShopifyClient.execute
        mutation: Mutation field name, e.g. "productCreate"

    Raises:
        RemoteValidationError: If userErrors is non-empty
        MalformedResponseError: If the payload is absent
    """
    data = _require(response, "data", "data")
    payload = _require(data, mutation, f"data.{mutation}")

    user_errors = payload.get("userErrors") or []
    if user_errors:
        messages = [
            e.get("message", str(e)) if isinstance(e, dict) else str(e)
            for e in user_errors
        ]
        raise RemoteValidationError(messages, step=mutation)

    return payload


def parse_variant(node: Any) -> RemoteVariant:
    variant_id = _require(node, "id", "variant id")
    selected = _require_list(node, "selectedOptions", "variant selectedOptions")
    if not selected:
        raise MalformedResponseError(
            f"Variant {variant_id} has no selected options"
        )

    selected_options: Dict[str, str] = {}
    for option in selected:
        name = _require(option, "name", "selected option name")
        selected_options[name] = _require(option, "value", "selected option value")

    inventory_item = _require(node, "inventoryItem", "variant inventoryItem")
    return RemoteVariant(
        id=variant_id,
        selected_options=selected_options,
        inventory_item_id=_require(inventory_item, "id", "inventoryItem id"),
    )


def parse_product(payload: Dict[str, Any]) -> RemoteProduct:
    """Build a RemoteProduct from the productCreate payload."""
    product = _require(payload, "product", "created product")

    options = []
    for option in product.get("options") or []:
        options.append(RemoteOption(
            id=_require(option, "id", "option id"),
            name=_require(option, "name", "option name"),
            values=list(option.get("values") or []),
            option_values=[
                RemoteOptionValue(
                    id=_require(value, "id", "option value id"),
                    name=_require(value, "name", "option value name"),
                )
                for value in option.get("optionValues") or []
            ],
        ))

    variants_conn = _require(product, "variants", "product variants")
    edges = _require_list(variants_conn, "edges", "product variant edges")
    variants = [
        parse_variant(_require(edge, "node", "variant node")) for edge in edges
    ]

    return RemoteProduct(
        id=_require(product, "id", "product id"),
        title=product.get("title") or "",
        status=product.get("status"),
        options=options,
        variants=variants,
    )


def first_active_location(payload: Dict[str, Any]) -> Location:
    """Pick the first active location from the productCreate payload."""
    shop = _require(payload, "shop", "shop")
    locations = _require(shop, "locations", "shop locations")
    nodes = _require_list(locations, "nodes", "shop location nodes")

    for node in nodes:
        if not isinstance(node, dict) or not node.get("id"):
            continue
        # isActive may be omitted or null; treat that as active
        if node.get("isActive") is not False:
            return Location(
                id=node["id"],
                name=node.get("name"),
                is_active=True,
                is_primary=bool(node.get("isPrimary", False)),
            )

    raise MalformedResponseError("Shop has no active location for inventory")


def updated_product(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Product fragment returned by productVariantsBulkUpdate."""
    product = _require(payload, "product", "updated product")
    if not isinstance(product, dict):
        raise MalformedResponseError("Shopify response has invalid updated product")
    return product
