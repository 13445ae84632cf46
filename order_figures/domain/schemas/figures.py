from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from order_figures.domain.models import Figures, TradeOrderType


class FiguresRequest(BaseModel):
    asset_id: str = Field(..., min_length=1)
    fohf_id: str = Field(..., min_length=1)
    currency: str = Field(..., min_length=3, max_length=3)
    type: TradeOrderType
    amount: Optional[Decimal] = None
    shares: Optional[Decimal] = None
    percentage: Optional[Decimal] = None
    whole_hedge_fund: bool = False
    trade_date: Optional[date] = None
    value_date: Optional[date] = None
    company_id: Optional[str] = None
    as_of_date: date


class FiguresResponse(BaseModel):
    asset_id: str
    type: TradeOrderType
    amount: Decimal
    price: Decimal
    currency: str
    shares: Decimal

    @classmethod
    def from_figures(cls, asset_id: str, type: TradeOrderType, figures: Figures) -> "FiguresResponse":
        return cls(
            asset_id=asset_id,
            type=type,
            amount=figures.amount,
            price=figures.price.value,
            currency=figures.price.currency.code,
            shares=figures.shares,
        )


class ErrorResponse(BaseModel):
    error: str
    detail: str
