"""
DOMAIN MODELS — TRADE ORDERS

Immutable structures describing a trade order and how much of the asset
it asks for. Exactly one quantity specification is carried per order.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from order_figures.domain.exceptions import OrderValidationError
from order_figures.domain.models.entities import Currency, FundOfFunds, HedgeFundAsset


class TradeOrderType(str, Enum):
    """Direction of a trade order"""
    SUBSCRIPTION = "SUBSCRIPTION"
    REDEMPTION = "REDEMPTION"


@dataclass(frozen=True)
class AmountSpec:
    """Monetary amount, in the order currency"""
    value: Decimal

    def __post_init__(self):
        if self.value <= Decimal('0'):
            raise OrderValidationError(f"Order amount must be positive, got {self.value}")


@dataclass(frozen=True)
class SharesSpec:
    """Number of shares"""
    value: Decimal

    def __post_init__(self):
        if self.value <= Decimal('0'):
            raise OrderValidationError(f"Order shares must be positive, got {self.value}")


@dataclass(frozen=True)
class PercentageSpec:
    """Percentage (0-100] of the investor's current holding"""
    value: Decimal

    def __post_init__(self):
        if not Decimal('0') < self.value <= Decimal('100'):
            raise OrderValidationError(
                f"Order percentage must be in (0, 100], got {self.value}"
            )


@dataclass(frozen=True)
class WholeHoldingSpec:
    """The investor's entire current holding"""

    @property
    def value(self) -> Decimal:
        return Decimal('100')


QuantitySpec = Union[AmountSpec, SharesSpec, PercentageSpec, WholeHoldingSpec]


@dataclass(frozen=True)
class TradeOrder:
    """Trade order placed by a fund of funds against a hedge fund asset"""
    asset: HedgeFundAsset
    currency: Currency
    fohf: FundOfFunds
    type: TradeOrderType
    quantity: QuantitySpec
    trade_date: Optional[date] = None
    value_date: Optional[date] = None
    company_id: Optional[str] = None

    @property
    def is_redemption(self) -> bool:
        return self.type == TradeOrderType.REDEMPTION

    @classmethod
    def from_fields(
        cls,
        asset: HedgeFundAsset,
        currency: Currency,
        fohf: FundOfFunds,
        type: TradeOrderType,
        amount: Optional[Decimal] = None,
        shares: Optional[Decimal] = None,
        percentage: Optional[Decimal] = None,
        whole_hedge_fund: bool = False,
        trade_date: Optional[date] = None,
        value_date: Optional[date] = None,
        company_id: Optional[str] = None,
    ) -> "TradeOrder":
        """
        Build an order from nullable quantity fields

        Args:
            amount / shares / percentage: at most one may be set
            whole_hedge_fund: redeem the entire holding instead

        Raises:
            OrderValidationError: unless exactly one quantity is given
        """
        given = {
            name: value
            for name, value in (
                ("amount", amount),
                ("shares", shares),
                ("percentage", percentage),
            )
            if value is not None
        }
        if whole_hedge_fund:
            given["whole_hedge_fund"] = True

        if len(given) != 1:
            if not given:
                raise OrderValidationError(
                    "Order must specify one of amount, shares, percentage or whole_hedge_fund"
                )
            raise OrderValidationError(
                f"Order must specify exactly one quantity, got {sorted(given)}"
            )

        if amount is not None:
            quantity = AmountSpec(amount)
        elif shares is not None:
            quantity = SharesSpec(shares)
        elif percentage is not None:
            quantity = PercentageSpec(percentage)
        else:
            quantity = WholeHoldingSpec()

        return cls(
            asset=asset,
            currency=currency,
            fohf=fohf,
            type=TradeOrderType(type),
            quantity=quantity,
            trade_date=trade_date,
            value_date=value_date,
            company_id=company_id,
        )
