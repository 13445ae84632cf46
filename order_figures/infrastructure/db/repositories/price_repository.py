"""
Asset Price Repository
Best price lookup for hedge fund assets
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_figures.domain.models import HedgeFundAsset, Price
from order_figures.infrastructure.db.models import AssetPriceModel


class PriceRepository:
    """Repository for asset price quotes"""

    def __init__(self, session: Session):
        """Initialize with database session"""
        self.session = session

    def create(
        self,
        asset_id: str,
        price_date: date,
        value: Decimal,
        min_quantity: Decimal = Decimal('0')
    ) -> int:
        model = AssetPriceModel(
            asset_id=asset_id,
            price_date=price_date,
            value=value,
            min_quantity=min_quantity
        )
        self.session.add(model)
        self.session.flush()
        return model.id

    def fetch_best_price_for(
        self,
        asset: HedgeFundAsset,
        as_of_date: date,
        reference_quantity: Decimal
    ) -> Optional[Price]:
        """
        Best price for an asset

        Most recent quote on or before the date whose size tier applies
        to the reference quantity; the lowest value wins within that day.

        Args:
            asset: Asset to price
            as_of_date: Pricing date
            reference_quantity: Order size used to pick the quote tier

        Returns:
            Price in the asset's currency, or None
        """
        result = self.session.execute(
            select(AssetPriceModel)
            .where(
                AssetPriceModel.asset_id == asset.asset_id,
                AssetPriceModel.price_date <= as_of_date,
                AssetPriceModel.min_quantity <= reference_quantity
            )
            .order_by(AssetPriceModel.price_date.desc(), AssetPriceModel.value.asc())
            .limit(1)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        return Price(value=Decimal(str(model.value)), currency=asset.currency)
