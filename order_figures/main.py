"""
FastAPI Main Application
Trade order figures service
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from order_figures.config import settings
from order_figures.core.logging import get_logger, setup_logging
from order_figures.infrastructure.db.database import init_db, close_db
from order_figures.api.routes import figures, health

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Handles startup and shutdown of the database
    """
    logger.info("Starting order figures service")
    init_db()
    logger.info(
        f"Figures precision: shares {settings.SHARES_DECIMAL_PLACES} dp, "
        f"amount {settings.AMOUNT_DECIMAL_PLACES} dp"
    )

    yield

    logger.info("Shutting down order figures service")
    close_db()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Trade Order Figures",
        description="Amount, price and shares for fund-of-funds trade orders",
        version="1.0.0",
        lifespan=lifespan
    )
    app.include_router(health.router, tags=["Health"])
    app.include_router(figures.router, prefix="/api/v1", tags=["Figures"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "order_figures.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG
    )
