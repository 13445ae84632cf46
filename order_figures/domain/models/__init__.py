"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    Currency,
    ExchangeRate,
    Figures,
    FundOfFunds,
    HedgeFundAsset,
    Position,
    Price,
)
from .order import (
    AmountSpec,
    PercentageSpec,
    QuantitySpec,
    SharesSpec,
    TradeOrder,
    TradeOrderType,
    WholeHoldingSpec,
)

__all__ = [
    # Entities
    "Currency",
    "ExchangeRate",
    "Figures",
    "FundOfFunds",
    "HedgeFundAsset",
    "Position",
    "Price",

    # Orders
    "AmountSpec",
    "PercentageSpec",
    "QuantitySpec",
    "SharesSpec",
    "TradeOrder",
    "TradeOrderType",
    "WholeHoldingSpec",
]
