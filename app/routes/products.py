"""
Product creation API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from ..dependencies import get_orchestrator
from ..products import (
    MissingCredentialsError,
    ProductCreationError,
    ProductOrchestrator,
    ProductSpec,
)
from ..shopify import ShopifyClientError


router = APIRouter(prefix="/api/v1/shopify")


@router.post("/products", status_code=201)
async def create_product(
    spec: ProductSpec,
    shop_domain: Optional[str] = Header(None, alias="X-Shopify-Shop-Domain"),
    access_token: Optional[str] = Header(None, alias="X-Shopify-Access-Token"),
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
):
    """Create a product, its variants and stock on the given shop."""
    if not shop_domain or not access_token:
        error = MissingCredentialsError()
        return JSONResponse(status_code=error.status_code, content={"error": str(error)})

    try:
        product = await orchestrator.create_product(spec, shop_domain, access_token)
    except (ProductCreationError, ShopifyClientError) as e:
        status_code = getattr(e, "status_code", 500)
        return JSONResponse(
            status_code=status_code,
            content={"status": "error", "message": str(e)},
        )

    return {
        "status": "success",
        "message": "Product created successfully on Shopify.",
        "product": product,
    }
