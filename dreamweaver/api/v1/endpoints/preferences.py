"""
Preference and settings endpoints.

Both always resolve to a complete record.
"""

from fastapi import APIRouter, Depends

from dreamweaver.api.dependencies import get_storage
from dreamweaver.db.storage import LocalStorage
from dreamweaver.schemas.preferences import AppSettings, AppSettingsUpdate, UserPreferences, UserPreferencesUpdate

router = APIRouter()


@router.get("/preferences", summary="Get user preferences.", response_model=UserPreferences)
def get_preferences(storage: LocalStorage = Depends(get_storage)):
    return storage.preferences.get()


@router.put("/preferences", summary="Replace user preferences.", response_model=UserPreferences)
def put_preferences(data: UserPreferences, storage: LocalStorage = Depends(get_storage)):
    storage.preferences.set(data)
    return data


@router.patch("/preferences", summary="Partially update user preferences.", response_model=UserPreferences)
def patch_preferences(data: UserPreferencesUpdate, storage: LocalStorage = Depends(get_storage)):
    return storage.preferences.update(data)


@router.get("/settings", summary="Get app settings.", response_model=AppSettings)
def get_settings(storage: LocalStorage = Depends(get_storage)):
    return storage.settings.get()


@router.patch("/settings", summary="Partially update app settings.", response_model=AppSettings)
def patch_settings(data: AppSettingsUpdate, storage: LocalStorage = Depends(get_storage)):
    return storage.settings.update(data)
