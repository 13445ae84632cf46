"""
Exchange Rate Repository
FX rates between currencies, by date
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_figures.domain.models import Currency, ExchangeRate
from order_figures.infrastructure.db.models import ExchangeRateModel

logger = logging.getLogger(__name__)


class ExchangeRateRepository:
    """Repository for exchange rates"""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        from_currency: str,
        to_currency: str,
        rate_date: date,
        value: Decimal
    ) -> int:
        model = ExchangeRateModel(
            from_currency=from_currency.upper(),
            to_currency=to_currency.upper(),
            rate_date=rate_date,
            value=value
        )
        self.session.add(model)
        self.session.flush()
        return model.id

    def get_exchange_rate(
        self,
        from_currency: Currency,
        to_currency: Currency,
        as_of_date: date
    ) -> Optional[ExchangeRate]:
        """
        Exchange rate from one currency to another

        Args:
            from_currency: Currency the amount is in
            to_currency: Currency wanted
            as_of_date: Rate date (latest rate on or before is used)

        Returns:
            ExchangeRate, or None when neither direction is quoted
        """
        if from_currency == to_currency:
            return ExchangeRate(value=Decimal('1'))

        direct = self._latest_rate(from_currency.code, to_currency.code, as_of_date)
        if direct is not None:
            return ExchangeRate(value=direct)

        reverse = self._latest_rate(to_currency.code, from_currency.code, as_of_date)
        if reverse is not None:
            logger.debug(f"Using inverse of {to_currency} -> {from_currency} rate {reverse}")
            return ExchangeRate(value=Decimal('1') / reverse)

        return None

    def _latest_rate(self, from_code: str, to_code: str, as_of_date: date) -> Optional[Decimal]:
        result = self.session.execute(
            select(ExchangeRateModel.value)
            .where(
                ExchangeRateModel.from_currency == from_code,
                ExchangeRateModel.to_currency == to_code,
                ExchangeRateModel.rate_date <= as_of_date
            )
            .order_by(ExchangeRateModel.rate_date.desc())
            .limit(1)
        )
        value = result.scalar_one_or_none()
        return Decimal(str(value)) if value is not None else None
