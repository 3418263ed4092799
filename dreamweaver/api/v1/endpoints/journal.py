"""
Journal entry endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from dreamweaver.api.dependencies import get_data_manager
from dreamweaver.schemas.journal_entry import EntryType, JournalEntry, JournalEntryCreate, JournalEntryUpdate
from dreamweaver.services.data_manager import DataManager

router = APIRouter()


@router.get("", summary="List journal entries with optional filters.", response_model=list[JournalEntry])
async def list_entries(session_id: Optional[str] = Query(None, description="Parent sleep session"),
                       entry_type: Optional[EntryType] = Query(None, description="'pre' or 'post'"),
                       manager: DataManager = Depends(get_data_manager), ):
    return await manager.get_journal_entries(session_id=session_id, entry_type=entry_type)


@router.post("", summary="Submit a journal entry.", response_model=JournalEntry, status_code=status.HTTP_201_CREATED, )
async def create_entry(data: JournalEntryCreate, manager: DataManager = Depends(get_data_manager)):
    entry = data.to_entity()
    await manager.save_journal_entry(entry)
    return entry


@router.get("/{entry_id}", summary="Get a journal entry.", response_model=JournalEntry)
async def get_entry(entry_id: str, manager: DataManager = Depends(get_data_manager)):
    entry = await manager.get_journal_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal entry not found")
    return entry


@router.patch("/{entry_id}", summary="Partially update a journal entry.", response_model=JournalEntry)
async def update_entry(entry_id: str, data: JournalEntryUpdate, manager: DataManager = Depends(get_data_manager)):
    try:
        entry = await manager.update_journal_entry(entry_id, data)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Invalid update: {e}")
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal entry not found")
    return entry


@router.delete("/{entry_id}", summary="Delete a journal entry.", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: str, manager: DataManager = Depends(get_data_manager)):
    await manager.delete_journal_entry(entry_id)
