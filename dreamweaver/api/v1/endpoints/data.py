"""
Data management endpoints.

Snapshot export/import, sync, backend selection and analytics.
"""

import datetime
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from dreamweaver.api.dependencies import get_backend_context, get_data_manager, get_snapshot_service, get_sync_service
from dreamweaver.backends.context import BackendContext
from dreamweaver.schemas.backend import BackendStatus, DatabaseConfig, SleepStats, SyncResult
from dreamweaver.schemas.base import as_utc, utcnow
from dreamweaver.services.data_manager import DataManager
from dreamweaver.services.snapshot_service import SnapshotService
from dreamweaver.services.sync_service import SyncService

router = APIRouter()


@router.get("/export", summary="Download a full snapshot of local data.")
def export_data(service: SnapshotService = Depends(get_snapshot_service)):
    document = service.export_all()
    return Response(content=service.to_json(document), media_type="application/json",
                    headers={"Content-Disposition": f'attachment; filename="{document.filename}"'}, )


@router.post("/import", summary="Restore local data from a snapshot.", status_code=status.HTTP_204_NO_CONTENT)
def import_data(document: Any = Body(...), service: SnapshotService = Depends(get_snapshot_service)):
    """Sections present in the document overwrite local data; nothing is
    written if the document is invalid."""
    if not service.import_all(document):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid snapshot document")


@router.post("/sync", summary="Synchronize with the active backend.", response_model=SyncResult)
async def sync_data(service: SyncService = Depends(get_sync_service)):
    success = await service.sync()
    return SyncResult(success=success, last_sync_date=service.get_last_sync_date())


@router.get("/backend", summary="Get the active backend.", response_model=BackendStatus)
async def get_backend(context: BackendContext = Depends(get_backend_context)):
    database = context.database
    return BackendStatus(provider=database.provider, online=await database.is_online())


@router.put("/backend", summary="Switch the active backend.", response_model=BackendStatus)
async def put_backend(config: DatabaseConfig, context: BackendContext = Depends(get_backend_context)):
    database = context.use(config)
    return BackendStatus(provider=database.provider, online=await database.is_online())


@router.get("/stats", summary="Sleep statistics over a time range.", response_model=SleepStats)
async def get_stats(start: Optional[datetime.datetime] = Query(None, description="Range start, default 30 days ago"),
                    end: Optional[datetime.datetime] = Query(None, description="Range end, default now"),
                    manager: DataManager = Depends(get_data_manager), ):
    end = as_utc(end) if end else utcnow()
    start = as_utc(start) if start else end - datetime.timedelta(days=30)
    return await manager.get_sleep_stats(start, end)
