"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Currency:
    """Currency of an asset or an order - Immutable"""
    code: str

    def __post_init__(self):
        if not self.code:
            raise ValueError("Currency code cannot be empty")
        object.__setattr__(self, "code", self.code.strip().upper())

    @property
    def symbol(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class HedgeFundAsset:
    """Tradable hedge fund asset, quoted in its native currency"""
    asset_id: str
    name: str
    currency: Currency

    def __post_init__(self):
        if not self.asset_id:
            raise ValueError("Asset id cannot be empty")


@dataclass(frozen=True)
class FundOfFunds:
    """Investor entity placing trade orders"""
    fohf_id: str
    name: str

    def __post_init__(self):
        if not self.fohf_id:
            raise ValueError("Fund of funds id cannot be empty")


@dataclass(frozen=True)
class Price:
    """Price per share, in the currency the asset is quoted in"""
    value: Decimal
    currency: Currency

    def __post_init__(self):
        if self.value <= Decimal('0'):
            raise ValueError("Price must be positive")


@dataclass(frozen=True)
class Position:
    """Shares held by an investor in an asset"""
    shares: Decimal

    def __post_init__(self):
        if self.shares < Decimal('0'):
            raise ValueError("Position shares cannot be negative")


@dataclass(frozen=True)
class ExchangeRate:
    """Multiplier converting one unit of a source currency into a target currency"""
    value: Decimal

    def __post_init__(self):
        if self.value <= Decimal('0'):
            raise ValueError("Exchange rate must be positive")

    def convert(self, amount: Decimal) -> Decimal:
        return amount * self.value


@dataclass(frozen=True)
class Figures:
    """Resolved amount / price / shares for an order - Immutable"""
    amount: Decimal
    price: Price
    shares: Decimal

    @property
    def currency(self) -> Currency:
        """Figures are always expressed in the asset's native currency"""
        return self.price.currency
