"""Business logic services."""

from dreamweaver.services.data_manager import DataManager
from dreamweaver.services.insight_generator import InsightGenerator
from dreamweaver.services.snapshot_service import SnapshotService
from dreamweaver.services.sync_service import SyncService

__all__ = [
    "DataManager",
    "InsightGenerator",
    "SnapshotService",
    "SyncService",
]
