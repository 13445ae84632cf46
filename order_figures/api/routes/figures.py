"""
Figures API Routes
Price a single trade order into amount / price / shares
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from order_figures.config import settings
from order_figures.domain.exceptions import (
    CurrencyResolutionError,
    InsufficientPositionError,
    LookupFailureError,
    OrderValidationError,
)
from order_figures.domain.models import TradeOrder
from order_figures.domain.schemas.figures import ErrorResponse, FiguresRequest, FiguresResponse
from order_figures.domain.services.figures_factory import FiguresFactory
from order_figures.infrastructure.db.database import get_db
from order_figures.infrastructure.db.repositories import (
    ExchangeRateRepository,
    PositionRepository,
    PriceRepository,
    ReferenceDataRepository,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def get_figures_factory(db: Session = Depends(get_db)) -> FiguresFactory:
    return FiguresFactory(
        price_fetcher=PriceRepository(db),
        position_fetcher=PositionRepository(db),
        fx_service=ExchangeRateRepository(db),
        shares_decimal_places=settings.SHARES_DECIMAL_PLACES,
        amount_decimal_places=settings.AMOUNT_DECIMAL_PLACES,
    )


def _error(status_code: int, code: str, reason) -> HTTPException:
    detail = ErrorResponse(error=code, detail=str(reason))
    return HTTPException(status_code=status_code, detail=detail.model_dump())


ERROR_RESPONSES = {
    404: {"description": "Unknown reference data, or no price or position"},
    409: {"description": "Redemption exceeds current position"},
    422: {"description": "Invalid quantity specification"},
    424: {"description": "No exchange rate for the order currency"},
}


@router.post("/figures", response_model=FiguresResponse, responses=ERROR_RESPONSES)
def build_figures(
    request: FiguresRequest,
    db: Session = Depends(get_db),
    factory: FiguresFactory = Depends(get_figures_factory),
):
    reference = ReferenceDataRepository(db)

    asset = reference.get_asset(request.asset_id)
    if asset is None:
        raise _error(404, "unknown_reference", f"Unknown asset: {request.asset_id}")

    fohf = reference.get_fohf(request.fohf_id)
    if fohf is None:
        raise _error(404, "unknown_reference", f"Unknown fund of funds: {request.fohf_id}")

    currency = reference.get_currency(request.currency)
    if currency is None:
        raise _error(404, "unknown_reference", f"Unknown currency: {request.currency}")

    try:
        order = TradeOrder.from_fields(
            asset=asset,
            currency=currency,
            fohf=fohf,
            type=request.type,
            amount=request.amount,
            shares=request.shares,
            percentage=request.percentage,
            whole_hedge_fund=request.whole_hedge_fund,
            trade_date=request.trade_date,
            value_date=request.value_date,
            company_id=request.company_id,
        )
        figures = factory.build_from(order, request.as_of_date)
    except OrderValidationError as e:
        raise _error(422, "invalid_order", e)
    except InsufficientPositionError as e:
        raise _error(409, "insufficient_position", e)
    except LookupFailureError as e:
        raise _error(404, "lookup_failed", e)
    except CurrencyResolutionError as e:
        raise _error(424, "currency_unresolved", e)

    logger.info(
        f"Figures for {fohf.fohf_id} {order.type.value} {asset.asset_id}: "
        f"{figures.shares} @ {figures.price.value} {figures.currency} = {figures.amount}"
    )
    return FiguresResponse.from_figures(asset.asset_id, order.type, figures)
