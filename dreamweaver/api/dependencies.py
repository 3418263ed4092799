"""
Shared API dependencies.

The backend context lives on ``app.state`` and is handed to services
through these dependencies.
"""

from fastapi import Depends, Request

from dreamweaver.backends.context import BackendContext
from dreamweaver.db.storage import LocalStorage
from dreamweaver.services.data_manager import DataManager
from dreamweaver.services.insight_generator import InsightGenerator
from dreamweaver.services.snapshot_service import SnapshotService
from dreamweaver.services.sync_service import SyncService


def get_backend_context(request: Request) -> BackendContext:
    return request.app.state.backend_context


def get_storage(context: BackendContext = Depends(get_backend_context)) -> LocalStorage:
    return context.storage


def get_data_manager(context: BackendContext = Depends(get_backend_context)) -> DataManager:
    return DataManager(context.database)


def get_snapshot_service(storage: LocalStorage = Depends(get_storage)) -> SnapshotService:
    return SnapshotService(storage)


def get_sync_service(context: BackendContext = Depends(get_backend_context)) -> SyncService:
    return SyncService(context.database, context.storage.settings)


def get_insight_generator(request: Request) -> InsightGenerator:
    return request.app.state.insight_generator
