"""
Database Configuration
SQLAlchemy setup for the reference data store
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from order_figures.config import settings


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def _connect_args(database_url: str) -> dict:
    # FastAPI runs sync dependencies in a threadpool
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database session
    Use in FastAPI routes as:
    def my_route(db: Session = Depends(get_db))
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize database (create tables)"""
    if not settings.AUTO_CREATE_TABLES:
        return
    # Import all models here to ensure they're registered
    from order_figures.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def close_db() -> None:
    """Close database connections"""
    engine.dispose()
