"""
Health API Routes
Liveness, and readiness of the reference data store
"""

from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from order_figures.infrastructure.db.database import get_db
from order_figures.infrastructure.db.models import AssetPriceModel

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok", "service": "order-figures"}


@router.get("/ready")
def ready(db: Session = Depends(get_db)):
    """Ready once the price table can be queried"""
    try:
        price_count = db.execute(select(func.count()).select_from(AssetPriceModel)).scalar_one()
        db_connected = True
    except SQLAlchemyError:
        price_count = None
        db_connected = False

    return {
        "status": "ready" if db_connected else "not_ready",
        "db_connected": db_connected,
        "prices_loaded": price_count,
    }
