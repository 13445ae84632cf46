"""
Figures Exceptions
==================

Domain-specific exceptions raised while building figures for a trade order.

Everything inherits from FiguresError. Business-rule failures are
OrderProcessingError subclasses; a missing exchange rate is reported
separately as CurrencyResolutionError so callers can tell an over-redemption
apart from an FX data gap.
"""

from datetime import date
from decimal import Decimal


class FiguresError(Exception):
    """Base exception for all figures errors."""
    pass


class OrderProcessingError(FiguresError):
    """Raised when an order breaks a business rule and cannot be priced."""
    pass


class OrderValidationError(OrderProcessingError):
    """Raised when the order's quantity specification is unusable.

    Examples:
    - None, or more than one, of amount/shares/percentage given
    - Non-positive amount or shares
    - Percentage outside (0, 100]
    - Percentage or whole holding used on a subscription
    """
    pass


class InsufficientPositionError(OrderProcessingError):
    """Raised when a redemption asks for more shares than are held."""

    def __init__(self, requested_shares: Decimal, held_shares: Decimal):
        self.requested_shares = requested_shares
        self.held_shares = held_shares
        super().__init__(
            f"Redemption of {requested_shares} shares exceeds "
            f"current position of {held_shares} shares"
        )


class LookupFailureError(OrderProcessingError):
    """Raised when the price or position lookup has no data.

    This indicates a data gap for the asset/date that must be resolved
    before the order can be priced.
    """
    pass


class CurrencyResolutionError(FiguresError):
    """Raised when no exchange rate exists for a required currency pair."""

    def __init__(self, from_currency: str, to_currency: str, as_of_date: date):
        self.from_currency = from_currency
        self.to_currency = to_currency
        self.as_of_date = as_of_date
        super().__init__(
            f"No exchange rate {from_currency} -> {to_currency} available for {as_of_date}"
        )
