from .fx_repository import ExchangeRateRepository
from .position_repository import PositionRepository
from .price_repository import PriceRepository
from .reference_repository import ReferenceDataRepository

__all__ = [
    "ExchangeRateRepository",
    "PositionRepository",
    "PriceRepository",
    "ReferenceDataRepository",
]
