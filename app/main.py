"""
Shopify Product Creator - Main Application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import settings
from .dependencies import init_dependencies, close_dependencies
from .routes import products_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Shopify Product Creator...")
    await init_dependencies()
    logger.info("Application ready")
    yield
    logger.info("Shutting down...")
    await close_dependencies()


# Create app
app = FastAPI(
    title="Shopify Product Creator",
    description="Create Shopify products with all their variants and stock",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(products_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
