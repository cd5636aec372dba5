"""
Tests for product input models.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.products import ProductSpec, ProductStatus, VariantSpec
from app.products.models import format_price


class TestProductSpec:
    """Tests for ProductSpec validation."""

    def test_valid_product(self, product_data):
        spec = ProductSpec.model_validate(product_data)

        assert spec.status is ProductStatus.ACTIVE
        assert spec.variants[0].price == Decimal("19.99")
        assert spec.variants[0].options == {"Size": "S", "Color": "Red"}

    def test_images_default_to_empty(self, product_data):
        del product_data["images"]

        spec = ProductSpec.model_validate(product_data)

        assert spec.images == []
        assert spec.media_input() == []

    def test_invalid_status_rejected(self, product_data):
        product_data["status"] = "invalid_status"

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)

    def test_invalid_image_url_rejected(self, product_data):
        product_data["images"] = [{"src": "invalid-url", "alt": "Product Image"}]

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)

    def test_negative_inventory_rejected(self, product_data):
        product_data["variants"][0]["inventory_quantity"] = -1

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)

    def test_variant_missing_option_rejected(self, product_data):
        product_data["variants"][1]["options"] = {"Color": "Blue"}

        with pytest.raises(ValidationError, match="do not match declared options"):
            ProductSpec.model_validate(product_data)

    def test_variant_with_unknown_option_rejected(self, product_data):
        product_data["variants"][0]["options"]["Material"] = "Cotton"

        with pytest.raises(ValidationError, match="do not match declared options"):
            ProductSpec.model_validate(product_data)

    def test_positional_options_rejected(self, product_data):
        # Options must be keyed by name
        product_data["variants"][0]["options"] = ["Red", "S"]

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)


class TestProductInput:
    """Tests for the productCreate variables built from a spec."""

    def test_status_is_uppercased(self, product_spec):
        assert product_spec.product_input()["status"] == "ACTIVE"

    def test_description_sent_as_html(self, product_spec):
        product_input = product_spec.product_input()

        assert product_input["descriptionHtml"] == "This is a test product description."
        assert product_input["productType"] == "Apparel"

    def test_options_mapped_to_option_values(self, product_spec):
        assert product_spec.product_input()["productOptions"] == [
            {"name": "Color", "values": [{"name": "Red"}, {"name": "Blue"}]},
            {"name": "Size", "values": [{"name": "S"}]},
        ]

    def test_every_image_becomes_media(self, product_data):
        product_data["images"] = [
            {"src": "https://example.com/front.png", "alt": "Front"},
            {"src": "https://example.com/back.png", "alt": "Back"},
        ]
        spec = ProductSpec.model_validate(product_data)

        assert spec.media_input() == [
            {"alt": "Front", "mediaContentType": "IMAGE", "originalSource": "https://example.com/front.png"},
            {"alt": "Back", "mediaContentType": "IMAGE", "originalSource": "https://example.com/back.png"},
        ]


class TestVariantSpec:

    def test_option_values_input(self):
        variant = VariantSpec(
            options={"Size": "S", "Color": "Blue"},
            price=Decimal("19.99"),
            sku="TSHIRT-S-BLUE",
            inventory_quantity=50,
        )

        assert variant.option_values_input() == [
            {"name": "S", "optionName": "Size"},
            {"name": "Blue", "optionName": "Color"},
        ]


class TestFormatPrice:

    def test_keeps_cents(self):
        assert format_price(Decimal("19.99")) == "19.99"

    def test_whole_number(self):
        assert format_price(Decimal("50")) == "50"

    def test_no_exponent(self):
        assert format_price(Decimal("1E+2")) == "100"


class TestRequiredLists:
    """Options, variants and option values must not be empty."""

    def test_empty_variants_rejected(self, product_data):
        """A product without variants is rejected."""
        product_data["variants"] = []

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)

    def test_empty_options_rejected(self, product_data):
        """A product without options is rejected even if variants have none."""
        product_data["options"] = []
        for variant in product_data["variants"]:
            variant["options"] = {}

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)

    def test_option_without_values_rejected(self, product_data):
        """Every option needs at least one value."""
        product_data["options"][1]["values"] = []

        with pytest.raises(ValidationError):
            ProductSpec.model_validate(product_data)
