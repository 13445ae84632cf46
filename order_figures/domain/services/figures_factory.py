"""
FIGURES FACTORY
Resolve a trade order into amount / price / shares

RESPONSIBILITIES:
- Price the order's asset at the as-of date
- Convert order amounts into the asset's native currency
- Derive shares from amount, percentage of holding or whole holding
- Refuse redemptions larger than the current position

RULES:
❌ No partial figures
❌ No clamping of over-redemptions
❌ No binary floats
✅ Figures always in the asset's native currency
✅ Derived shares rounded DOWN
✅ Stateless, collaborators injected
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_EVEN, localcontext
from typing import Dict, Optional, Protocol

from order_figures.domain.exceptions import (
    CurrencyResolutionError,
    InsufficientPositionError,
    LookupFailureError,
    OrderValidationError,
)
from order_figures.domain.models import (
    AmountSpec,
    Currency,
    ExchangeRate,
    Figures,
    FundOfFunds,
    HedgeFundAsset,
    PercentageSpec,
    Position,
    Price,
    SharesSpec,
    TradeOrder,
    WholeHoldingSpec,
)

logger = logging.getLogger(__name__)

# Working precision for figures arithmetic
DECIMAL_PRECISION = 50


class PriceFetcher(Protocol):
    """Protocol for best price lookup"""

    def fetch_best_price_for(
        self,
        asset: HedgeFundAsset,
        as_of_date: date,
        reference_quantity: Decimal
    ) -> Optional[Price]:
        """Best price per share for the asset, in its native currency"""
        ...


class PositionFetcher(Protocol):
    """Protocol for investor position lookup"""

    def get_asset_position(
        self,
        asset: HedgeFundAsset,
        fohf: FundOfFunds,
        as_of_date: date
    ) -> Optional[Position]:
        """Shares of the asset held by the investor"""
        ...


class FXService(Protocol):
    """Protocol for exchange rate lookup"""

    def get_exchange_rate(
        self,
        from_currency: Currency,
        to_currency: Currency,
        as_of_date: date
    ) -> Optional[ExchangeRate]:
        """Rate such that amount_from * rate == amount_to"""
        ...


class FiguresFactory:
    """
    Figures Factory
    Turns a partially specified order into a consistent figures triple
    """

    def __init__(
        self,
        price_fetcher: PriceFetcher,
        position_fetcher: PositionFetcher,
        fx_service: FXService,
        shares_decimal_places: int = 6,
        amount_decimal_places: int = 2
    ):
        """
        Initialize with lookup dependencies

        Args:
            price_fetcher: Best price lookup
            position_fetcher: Investor position lookup
            fx_service: Exchange rate lookup
            shares_decimal_places: Scale of shares derived by division
            amount_decimal_places: Scale of the resulting amount
        """
        self.price_fetcher = price_fetcher
        self.position_fetcher = position_fetcher
        self.fx_service = fx_service
        self.shares_quantum = Decimal(1).scaleb(-shares_decimal_places)
        self.amount_quantum = Decimal(1).scaleb(-amount_decimal_places)

    def build_from(self, order: TradeOrder, as_of_date: date) -> Figures:
        """
        Build figures for an order

        Args:
            order: Trade order with exactly one quantity specification
            as_of_date: Date the order is priced against

        Returns:
            Figures in the asset's native currency

        Raises:
            OrderValidationError: Quantity unusable for this order type
            InsufficientPositionError: Redemption exceeds current position
            LookupFailureError: No price or position available
            CurrencyResolutionError: No exchange rate for the order currency
        """
        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            return self._build(order, as_of_date)

    def _build(self, order: TradeOrder, as_of_date: date) -> Figures:
        asset = order.asset
        quantity = order.quantity
        positions: Dict[date, Position] = {}

        if isinstance(quantity, (PercentageSpec, WholeHoldingSpec)) and not order.is_redemption:
            raise OrderValidationError(
                f"{type(quantity).__name__} is only valid for redemption orders"
            )

        price = self._fetch_price(asset, as_of_date, quantity.value)

        if isinstance(quantity, AmountSpec):
            native_amount = self._to_native_amount(order, as_of_date)
            shares = self._quantize(native_amount / price.value, self.shares_quantum, ROUND_DOWN)
        elif isinstance(quantity, SharesSpec):
            shares = quantity.value
        elif isinstance(quantity, PercentageSpec):
            position = self._fetch_position(order, as_of_date, positions)
            shares = self._quantize(
                position.shares * quantity.value / Decimal('100'), self.shares_quantum, ROUND_DOWN
            )
        elif isinstance(quantity, WholeHoldingSpec):
            shares = self._fetch_position(order, as_of_date, positions).shares
        else:
            raise OrderValidationError(f"Unsupported quantity specification: {quantity!r}")

        if shares <= Decimal('0'):
            raise OrderValidationError(
                f"Order for {asset.asset_id} resolves to no shares at price {price.value}"
            )

        if order.is_redemption:
            validation_date = order.trade_date or as_of_date
            position = self._fetch_position(order, validation_date, positions)
            if shares > position.shares:
                logger.warning(
                    f"Rejected redemption for {order.fohf.fohf_id}/{asset.asset_id}: "
                    f"{shares} shares requested, {position.shares} held on {validation_date}"
                )
                raise InsufficientPositionError(shares, position.shares)

        amount = self._quantize(shares * price.value, self.amount_quantum, ROUND_HALF_EVEN)

        logger.debug(
            f"Figures for {order.type.value} {asset.asset_id}: "
            f"{shares} @ {price.value} {asset.currency} = {amount}"
        )

        return Figures(
            amount=amount,
            price=Price(value=price.value, currency=asset.currency),
            shares=shares
        )

    @staticmethod
    def _quantize(value: Decimal, quantum: Decimal, rounding: str) -> Decimal:
        """
        Round to a fixed scale

        Raises:
            OrderValidationError: Value has more digits than DECIMAL_PRECISION allows
        """
        try:
            return value.quantize(quantum, rounding=rounding)
        except InvalidOperation:
            raise OrderValidationError(
                f"Order figure {value} exceeds {DECIMAL_PRECISION} significant digits"
            )

    def _fetch_price(
        self,
        asset: HedgeFundAsset,
        as_of_date: date,
        reference_quantity: Decimal
    ) -> Price:
        price = self.price_fetcher.fetch_best_price_for(asset, as_of_date, reference_quantity)
        if price is None:
            raise LookupFailureError(f"No price available for {asset.asset_id} on {as_of_date}")
        return price

    def _fetch_position(
        self,
        order: TradeOrder,
        as_of_date: date,
        positions: Dict[date, Position]
    ) -> Position:
        """Position lookup, reused within one build when the date matches"""
        if as_of_date not in positions:
            position = self.position_fetcher.get_asset_position(order.asset, order.fohf, as_of_date)
            if position is None:
                raise LookupFailureError(
                    f"No position for {order.fohf.fohf_id} in {order.asset.asset_id} on {as_of_date}"
                )
            positions[as_of_date] = position
        return positions[as_of_date]

    def _to_native_amount(self, order: TradeOrder, as_of_date: date) -> Decimal:
        """Order amount expressed in the asset's native currency"""
        native_currency = order.asset.currency
        if order.currency == native_currency:
            return order.quantity.value

        rate = self.fx_service.get_exchange_rate(order.currency, native_currency, as_of_date)
        if rate is None:
            raise CurrencyResolutionError(order.currency.code, native_currency.code, as_of_date)

        logger.debug(f"Converting {order.currency} -> {native_currency} at {rate.value}")
        return rate.convert(order.quantity.value)
