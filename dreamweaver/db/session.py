"""
Database engine management.

Provides the SQLModel engine backing the key-value store.
"""

from functools import lru_cache
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from dreamweaver.core.config import settings


def create_storage_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given database URL.

    SQLite connections may be used from the FastAPI thread pool.
    In-memory SQLite uses one static connection shared by every session.

    Args:
        url: SQLAlchemy database URL
        echo: Log SQL statements

    Returns:
        SQLAlchemy engine
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, echo=echo, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_engine() -> Optional[Engine]:
    """
    Return the process engine, or ``None`` when persistence is disabled.

    A ``None`` engine puts the key-value store into no-op mode.
    """
    if not settings.PERSISTENCE_ENABLED:
        return None
    return create_storage_engine(settings.STORAGE_URL, echo=settings.DEBUG)
