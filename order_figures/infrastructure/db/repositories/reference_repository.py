"""
Reference Data Repository
Currencies, hedge fund assets and funds of funds
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_figures.domain.models import Currency, FundOfFunds, HedgeFundAsset
from order_figures.infrastructure.db.models import (
    CurrencyModel,
    FundOfFundsModel,
    HedgeFundAssetModel,
)


class ReferenceDataRepository:
    """Repository for static reference data"""

    def __init__(self, session: Session):
        """Initialize with database session"""
        self.session = session

    def create_currency(self, code: str, name: Optional[str] = None) -> Currency:
        model = CurrencyModel(code=code.upper(), name=name)
        self.session.add(model)
        self.session.flush()
        return Currency(model.code)

    def create_asset(self, asset_id: str, name: str, currency_code: str) -> HedgeFundAsset:
        model = HedgeFundAssetModel(id=asset_id, name=name, currency_code=currency_code.upper())
        self.session.add(model)
        self.session.flush()
        return HedgeFundAsset(asset_id=model.id, name=model.name, currency=Currency(model.currency_code))

    def create_fohf(self, fohf_id: str, name: str) -> FundOfFunds:
        model = FundOfFundsModel(id=fohf_id, name=name)
        self.session.add(model)
        self.session.flush()
        return FundOfFunds(fohf_id=model.id, name=model.name)

    def get_currency(self, code: str) -> Optional[Currency]:
        model = self.session.get(CurrencyModel, code.upper())
        return Currency(model.code) if model else None

    def get_asset(self, asset_id: str) -> Optional[HedgeFundAsset]:
        result = self.session.execute(
            select(HedgeFundAssetModel).where(HedgeFundAssetModel.id == asset_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        return HedgeFundAsset(
            asset_id=model.id,
            name=model.name,
            currency=Currency(model.currency_code)
        )

    def get_fohf(self, fohf_id: str) -> Optional[FundOfFunds]:
        model = self.session.get(FundOfFundsModel, fohf_id)
        return FundOfFunds(fohf_id=model.id, name=model.name) if model else None
