"""
User repository.

The user is a singleton per device: one implicit record under one key.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from dreamweaver.db.kv_store import KeyValueStore, StorageKeys
from dreamweaver.db.repositories.base import Updates, storage_fields
from dreamweaver.schemas.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for the device user."""

    key = StorageKeys.USER

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get(self) -> Optional[User]:
        """
        Get the stored user.

        Returns:
            User if one is stored and valid, None otherwise
        """
        raw = self.store.get(self.key)
        if not isinstance(raw, dict):
            return None
        try:
            return User.model_validate(raw)
        except ValidationError:
            logger.warning("Stored user record is invalid")
            return None

    def set(self, user: User) -> None:
        """Replace the user record."""
        self.store.set(self.key, user.to_storage())

    def update(self, updates: Updates) -> Optional[User]:
        """
        Shallow-merge updates onto the stored user.

        Args:
            updates: Update schema or mapping of fields

        Returns:
            Updated user, or None (no-op) when no user is stored
        """
        raw = self.store.get(self.key)
        if not isinstance(raw, dict):
            return None
        user = User.model_validate({**raw, **storage_fields(User, updates)})
        self.set(user)
        return user

    def clear(self) -> None:
        self.store.remove(self.key)
