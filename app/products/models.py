"""
Pydantic models for product creation input.
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, HttpUrl, model_validator


class ProductStatus(str, Enum):
    """Product status accepted by Shopify."""
    ACTIVE = "active"
    DRAFT = "draft"
    ARCHIVED = "archived"


class OptionSpec(BaseModel):
    """A product option and its values, e.g. Color: Red, Blue."""
    name: str
    values: List[str] = Field(min_length=1)


class VariantSpec(BaseModel):
    """A requested variant, keyed by option name."""
    options: Dict[str, str]  # option name -> value
    price: Decimal
    sku: str
    inventory_quantity: int = Field(ge=0)

    def option_values_input(self) -> List[dict]:
        """optionValues input for the bulk variant mutations."""
        return [
            {"name": value, "optionName": name}
            for name, value in self.options.items()
        ]


class ImageSpec(BaseModel):
    """An image to attach to the product as media."""
    src: HttpUrl
    alt: str


class ProductSpec(BaseModel):
    """A normalized product to create on Shopify."""
    title: str
    description: str  # sent as descriptionHtml
    vendor: str
    product_type: str
    status: ProductStatus
    options: List[OptionSpec] = Field(min_length=1)
    variants: List[VariantSpec] = Field(min_length=1)
    images: List[ImageSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_variant_option_names(self) -> "ProductSpec":
        option_names = {option.name for option in self.options}
        for index, variant in enumerate(self.variants):
            if set(variant.options) != option_names:
                raise ValueError(
                    f"variants[{index}].options keys {sorted(variant.options)} "
                    f"do not match declared options {sorted(option_names)}"
                )
        return self

    def product_input(self) -> dict:
        """ProductInput for the productCreate mutation."""
        return {
            "title": self.title,
            "descriptionHtml": self.description,
            "vendor": self.vendor,
            "productType": self.product_type,
            "status": self.status.value.upper(),
            "productOptions": [
                {
                    "name": option.name,
                    "values": [{"name": value} for value in option.values],
                }
                for option in self.options
            ],
        }

    def media_input(self) -> List[dict]:
        """CreateMediaInput list, one entry per image."""
        return [
            {
                "alt": image.alt,
                "mediaContentType": "IMAGE",
                "originalSource": str(image.src),
            }
            for image in self.images
        ]


def format_price(price: Decimal) -> str:
    """Format a price as the decimal string Shopify's Money scalar expects."""
    return format(price, "f")
