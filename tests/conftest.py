from datetime import date
from decimal import Decimal
from typing import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from order_figures.infrastructure.db.database import Base, get_db
from order_figures.infrastructure.db import models  # noqa: F401
from order_figures.infrastructure.db.repositories import (
    ExchangeRateRepository,
    PositionRepository,
    PriceRepository,
    ReferenceDataRepository,
)
from order_figures.main import create_app


FIRST_SEPTEMBER = date(2011, 9, 1)


@pytest.fixture(scope="session")
def db_engine(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    session_maker = sessionmaker(db_engine, expire_on_commit=False)
    with session_maker() as session:
        yield session
        # cleanup
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()


@pytest.fixture()
def seeded_session(db_session) -> Session:
    """GBP and USD assets priced at 5 GBP and 2 USD, 100 shares held on 01/09/2011"""
    reference = ReferenceDataRepository(db_session)
    reference.create_currency("GBP", "Pound Sterling")
    reference.create_currency("USD", "US Dollar")
    reference.create_currency("EUR", "Euro")
    reference.create_asset("HF-GBP", "Sterling Macro Fund", "GBP")
    reference.create_asset("HF-USD", "Dollar Credit Fund", "USD")
    reference.create_fohf("FOHF-1", "Multi Strategy FoHF")

    prices = PriceRepository(db_session)
    prices.create("HF-GBP", FIRST_SEPTEMBER, Decimal("5"))
    prices.create("HF-USD", FIRST_SEPTEMBER, Decimal("2"))

    PositionRepository(db_session).create("HF-GBP", "FOHF-1", FIRST_SEPTEMBER, Decimal("100"))
    ExchangeRateRepository(db_session).create("GBP", "USD", FIRST_SEPTEMBER, Decimal("1.5"))
    return db_session


@pytest.fixture()
def app(seeded_session) -> FastAPI:
    app = create_app()

    def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
