"""
Asset Position Repository
Investor holdings per asset
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_figures.domain.models import FundOfFunds, HedgeFundAsset, Position
from order_figures.infrastructure.db.models import AssetPositionModel


class PositionRepository:
    """Repository for investor positions"""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        asset_id: str,
        fohf_id: str,
        position_date: date,
        shares: Decimal
    ) -> int:
        model = AssetPositionModel(
            asset_id=asset_id,
            fohf_id=fohf_id,
            position_date=position_date,
            shares=shares
        )
        self.session.add(model)
        self.session.flush()
        return model.id

    def get_asset_position(
        self,
        asset: HedgeFundAsset,
        fohf: FundOfFunds,
        as_of_date: date
    ) -> Optional[Position]:
        """Latest position recorded on or before the date"""
        result = self.session.execute(
            select(AssetPositionModel)
            .where(
                AssetPositionModel.asset_id == asset.asset_id,
                AssetPositionModel.fohf_id == fohf.fohf_id,
                AssetPositionModel.position_date <= as_of_date
            )
            .order_by(AssetPositionModel.position_date.desc())
            .limit(1)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        return Position(shares=Decimal(str(model.shares)))
