"""
Database initialization.

Creates the key-value table.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Args:
        engine: Engine to initialize, defaults to the process engine
    """
    # Import all models so SQLModel.metadata has them
    from dreamweaver.models.kv_entry import KeyValueEntry  # noqa: F401

    if engine is None:
        from dreamweaver.db.session import get_engine
        engine = get_engine()
    if engine is None:
        logger.info("Persistence disabled, skipping schema creation")
        return

    SQLModel.metadata.create_all(engine)
    logger.info("Key-value table ready at %s", engine.url)
