"""
Key-value store.

Durable mapping from string keys to JSON-serialized values.  Every
repository sits on top of this store.

Failure model
-------------
Reads resolve any failure (missing key, unreadable row, corrupt JSON) to
``None``.  Writes are fire-and-forget: a serialization or database error
is logged and swallowed, the caller proceeds as if the write happened.

Without a durable medium (``engine is None``) every operation is a no-op
and every read returns ``None``.
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from dreamweaver.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


class StorageKeys:
    """Flat keys of the persisted state layout."""

    USER = "dreamweaver_user"
    SLEEP_SESSIONS = "dreamweaver_sleep_sessions"
    JOURNAL_ENTRIES = "dreamweaver_journal_entries"
    COACHING_INSIGHTS = "dreamweaver_coaching_insights"
    USER_PREFERENCES = "dreamweaver_user_preferences"
    APP_SETTINGS = "dreamweaver_app_settings"


class KeyValueStore:
    """JSON key-value store on a SQLModel table."""

    def __init__(self, engine: Optional[Engine]):
        """
        Initialize the store and make sure its table exists.

        Args:
            engine: SQLAlchemy engine, or ``None`` for no durable medium
        """
        self.engine = engine
        if engine is not None:
            try:
                SQLModel.metadata.create_all(engine, tables=[KeyValueEntry.__table__])
            except SQLAlchemyError:
                logger.exception("Error creating key-value table")

    @property
    def available(self) -> bool:
        """``True`` when a durable medium is attached."""
        return self.engine is not None

    def get(self, key: str) -> Optional[Any]:
        if self.engine is None:
            return None

        try:
            with Session(self.engine) as session:
                entry = session.get(KeyValueEntry, key)
                raw = entry.value if entry else None
        except SQLAlchemyError:
            logger.exception("Error reading from storage for key %s", key)
            return None

        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.error("Error decoding stored value for key %s", key, exc_info=True)
            return None

    def set(self, key: str, value: Any) -> None:
        if self.engine is None:
            return

        try:
            raw = json.dumps(value)
        except (TypeError, ValueError):
            logger.error("Error serializing value for key %s", key, exc_info=True)
            return

        try:
            with Session(self.engine) as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    entry = KeyValueEntry(key=key, value=raw)
                else:
                    entry.value = raw
                    entry.updated_at = datetime.datetime.now(datetime.timezone.utc)
                session.add(entry)
                session.commit()
        except SQLAlchemyError:
            logger.exception("Error writing to storage for key %s", key)

    def remove(self, key: str) -> None:
        if self.engine is None:
            return

        try:
            with Session(self.engine) as session:
                entry = session.get(KeyValueEntry, key)
                if entry is not None:
                    session.delete(entry)
                    session.commit()
        except SQLAlchemyError:
            logger.exception("Error removing from storage for key %s", key)

    def clear(self) -> None:
        if self.engine is None:
            return

        try:
            with Session(self.engine) as session:
                for entry in session.exec(select(KeyValueEntry)).all():
                    session.delete(entry)
                session.commit()
        except SQLAlchemyError:
            logger.exception("Error clearing storage")
