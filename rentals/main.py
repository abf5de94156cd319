"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rentals.api.routes import (
    contracts,
    health,
    landlords,
    pairings,
    properties,
    rent_payments,
    tenants,
    units,
    users,
    utilities,
)
from rentals.core.config import settings
from rentals.core.database import Base, engine
from rentals.core.logging import setup_logging

# Import models for Base.metadata.create_all
import rentals.models  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Rental property management: tenants, contracts, rent and utility billing",
    lifespan=lifespan,
)

app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(users.router, prefix="/api")
app.include_router(properties.router, prefix="/api")
app.include_router(units.router, prefix="/api")
app.include_router(pairings.router, prefix="/api")
app.include_router(tenants.router, prefix="/api")
app.include_router(landlords.router, prefix="/api")
app.include_router(contracts.router, prefix="/api")
app.include_router(rent_payments.router, prefix="/api")
app.include_router(utilities.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rentals.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
