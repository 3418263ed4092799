"""
Key-value entry database model.

Every persisted record of the application lives in this one table: a flat
string key mapped to a JSON-serialized value.
"""

import datetime

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class KeyValueEntry(SQLModel, table=True):
    """A single serialized value stored under a string key."""

    __tablename__ = "kv_entries"

    key: str = Field(primary_key=True, max_length=255)
    value: str = Field(nullable=False)

    updated_at: datetime.datetime = Field(default_factory=_utcnow)
