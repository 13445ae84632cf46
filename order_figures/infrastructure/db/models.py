"""
Database Models (SQLAlchemy ORM)
Reference data read by the price, position and FX lookups
"""

from sqlalchemy import (
    Column, Integer, String, Numeric, Date, ForeignKey, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship

from order_figures.infrastructure.db.database import Base


class CurrencyModel(Base):
    """Currency reference"""
    __tablename__ = "currency"

    code = Column(String(3), primary_key=True)
    name = Column(String(100), nullable=True)


class HedgeFundAssetModel(Base):
    """Tradable hedge fund asset"""
    __tablename__ = "hedge_fund_asset"

    id = Column(String(32), primary_key=True)
    name = Column(String(200), nullable=False)
    currency_code = Column(String(3), ForeignKey("currency.code"), nullable=False)

    # Relationships
    currency = relationship("CurrencyModel")
    prices = relationship("AssetPriceModel", back_populates="asset")


class FundOfFundsModel(Base):
    """Investor placing orders"""
    __tablename__ = "fund_of_funds"

    id = Column(String(32), primary_key=True)
    name = Column(String(200), nullable=False)


class AssetPriceModel(Base):
    """Price quote per share, in the asset's currency"""
    __tablename__ = "asset_price"

    id = Column(Integer, primary_key=True, autoincrement=True)
    asset_id = Column(String(32), ForeignKey("hedge_fund_asset.id"), nullable=False)
    price_date = Column(Date, nullable=False)
    value = Column(Numeric(18, 6), nullable=False)
    # Size tier: quote applies when the order's raw quantity value (amount in
    # order currency, shares, or percentage; 100 for a whole holding) is at least this
    min_quantity = Column(Numeric(18, 6), nullable=False, default=0)

    # Relationships
    asset = relationship("HedgeFundAssetModel", back_populates="prices")

    # Indexes
    __table_args__ = (
        Index('ix_asset_price_lookup', 'asset_id', 'price_date'),
    )


class AssetPositionModel(Base):
    """Shares held by an investor as of a date"""
    __tablename__ = "asset_position"

    id = Column(Integer, primary_key=True, autoincrement=True)
    asset_id = Column(String(32), ForeignKey("hedge_fund_asset.id"), nullable=False)
    fohf_id = Column(String(32), ForeignKey("fund_of_funds.id"), nullable=False)
    position_date = Column(Date, nullable=False)
    shares = Column(Numeric(18, 6), nullable=False)

    # Indexes
    __table_args__ = (
        UniqueConstraint('asset_id', 'fohf_id', 'position_date', name='uq_asset_position_day'),
        Index('ix_asset_position_lookup', 'asset_id', 'fohf_id', 'position_date'),
    )


class ExchangeRateModel(Base):
    """FX rate: 1 unit of from_currency = value units of to_currency"""
    __tablename__ = "exchange_rate"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_currency = Column(String(3), ForeignKey("currency.code"), nullable=False)
    to_currency = Column(String(3), ForeignKey("currency.code"), nullable=False)
    rate_date = Column(Date, nullable=False)
    value = Column(Numeric(18, 8), nullable=False)

    # Indexes
    __table_args__ = (
        UniqueConstraint('from_currency', 'to_currency', 'rate_date', name='uq_exchange_rate_day'),
        Index('ix_exchange_rate_lookup', 'from_currency', 'to_currency', 'rate_date'),
    )
