#!/usr/bin/env python3
"""
Create a product on Shopify from a JSON file.

Usage:
    python scripts/create_product.py product.json --shop mystore.myshopify.com --token shpat_...

Shop and token default to SHOPIFY_SHOP_DOMAIN / SHOPIFY_ACCESS_TOKEN from .env.
"""

import argparse
import asyncio
import json
import logging
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from app.config import settings
from app.products import ProductCreationError, ProductOrchestrator, ProductSpec
from app.shopify import ShopifyClient, ShopifyClientError

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create a Shopify product")
    parser.add_argument("product_file", help="Path to the product JSON file")
    parser.add_argument("--shop", default=settings.shopify_shop_domain)
    parser.add_argument("--token", default=settings.shopify_access_token)
    parser.add_argument(
        "--delete-on-failure",
        action="store_true",
        default=settings.delete_on_failure,
        help="Delete the product again if a later step fails",
    )
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        with open(args.product_file, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read product file {args.product_file}: {e}")
        return 1

    try:
        spec = ProductSpec.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Invalid product file: {e}")
        return 1

    async with ShopifyClient(
        api_version=settings.shopify_api_version,
        timeout=settings.request_timeout,
        connect_timeout=settings.connect_timeout,
    ) as client:
        orchestrator = ProductOrchestrator(
            client, delete_on_failure=args.delete_on_failure
        )
        try:
            product = await orchestrator.create_product(spec, args.shop, args.token)
        except (ProductCreationError, ShopifyClientError) as e:
            logger.error(f"Product creation failed: {e}")
            return 1

    print(json.dumps(product, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
