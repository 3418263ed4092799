"""
Sleep session endpoints.

CRUD for sleep sessions plus ending an open session.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from dreamweaver.api.dependencies import get_data_manager
from dreamweaver.schemas.base import as_utc
from dreamweaver.schemas.sleep_session import SleepSession, SleepSessionCreate, SleepSessionEnd, SleepSessionUpdate
from dreamweaver.services.data_manager import DataManager

router = APIRouter()


@router.get("", summary="List sleep sessions with optional start-time range.", response_model=list[SleepSession], )
async def list_sessions(start: Optional[datetime.datetime] = Query(None, description="Range start (inclusive)"),
                        end: Optional[datetime.datetime] = Query(None, description="Range end (inclusive)"),
                        manager: DataManager = Depends(get_data_manager), ):
    return await manager.get_sleep_sessions(as_utc(start) if start else None, as_utc(end) if end else None)


@router.post("", summary="Log a sleep session.", response_model=SleepSession, status_code=status.HTTP_201_CREATED, )
async def create_session(data: SleepSessionCreate, manager: DataManager = Depends(get_data_manager)):
    session = data.to_entity()
    await manager.save_sleep_session(session)
    return session


@router.get("/{session_id}", summary="Get a sleep session.", response_model=SleepSession)
async def get_session(session_id: str, manager: DataManager = Depends(get_data_manager)):
    session = await manager.get_sleep_session(session_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sleep session not found")
    return session


@router.patch("/{session_id}", summary="Partially update a sleep session.", response_model=SleepSession)
async def update_session(session_id: str, data: SleepSessionUpdate, manager: DataManager = Depends(get_data_manager)):
    try:
        session = await manager.update_sleep_session(session_id, data)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Invalid update: {e}")
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sleep session not found")
    return session


@router.post("/{session_id}/end", summary="End an open sleep session.", response_model=SleepSession)
async def end_session(session_id: str, data: SleepSessionEnd, manager: DataManager = Depends(get_data_manager)):
    session = await manager.end_sleep_session(session_id, data)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sleep session not found")
    return session


@router.delete("/{session_id}", summary="Delete a sleep session.", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, manager: DataManager = Depends(get_data_manager)):
    await manager.delete_sleep_session(session_id)
