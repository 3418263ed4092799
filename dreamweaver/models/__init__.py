"""Database models (SQLModel tables)."""

from dreamweaver.models.kv_entry import KeyValueEntry

__all__ = ["KeyValueEntry"]
