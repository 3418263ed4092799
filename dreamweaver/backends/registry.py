"""
Backend registry.

Maps provider tags to backend factories.  Built-in providers are
registered below; further providers are added with
:func:`BackendRegistry.register`.  Creation is fail-soft: an unknown tag
falls back to the local backend with a warning.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from dreamweaver.backends.base import DatabaseOperations
from dreamweaver.backends.firebase import FirebaseDatabase
from dreamweaver.backends.local import LocalDatabase
from dreamweaver.backends.supabase import SupabaseDatabase
from dreamweaver.db.storage import LocalStorage
from dreamweaver.schemas.backend import DatabaseConfig

logger = logging.getLogger(__name__)

BackendFactory = Callable[[DatabaseConfig, LocalStorage], DatabaseOperations]

LOCAL_PROVIDER = "local"


class BackendRegistry:
    """Registry of available backend factories."""

    _factories: dict[str, BackendFactory] = {}

    @classmethod
    def register(cls, provider: str, factory: BackendFactory) -> None:
        """Register a backend factory.

        Raises :class:`ValueError` if *provider* is already taken.
        """
        if provider in cls._factories:
            raise ValueError(f"Backend provider '{provider}' already registered")
        cls._factories[provider] = factory

    @classmethod
    def unregister(cls, provider: str) -> None:
        cls._factories.pop(provider, None)

    @classmethod
    def get(cls, provider: str) -> Optional[BackendFactory]:
        return cls._factories.get(provider)

    @classmethod
    def available_providers(cls) -> list[str]:
        return sorted(cls._factories.keys())

    @classmethod
    def create(cls, config: DatabaseConfig, storage: LocalStorage) -> DatabaseOperations:
        """Instantiate the backend for ``config.provider``."""
        factory = cls._factories.get(config.provider)
        if factory is None:
            logger.warning("Unknown database provider: %s. Using local storage.", config.provider)
            return LocalDatabase(storage)
        return factory(config, storage)


def create_database(config: DatabaseConfig, storage: LocalStorage) -> DatabaseOperations:
    return BackendRegistry.create(config, storage)


# Register all built-in backends
BackendRegistry.register(LOCAL_PROVIDER, lambda config, storage: LocalDatabase(storage))
BackendRegistry.register("supabase", lambda config, storage: SupabaseDatabase(config))
BackendRegistry.register("firebase", lambda config, storage: FirebaseDatabase(config))
