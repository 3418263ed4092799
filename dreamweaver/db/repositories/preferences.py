"""
Preference and settings stores.

Defaults are the field defaults of the schemas and are not configurable at
runtime.
"""

from dreamweaver.db.kv_store import StorageKeys
from dreamweaver.db.repositories.base import SingleRecordStore
from dreamweaver.schemas.preferences import AppSettings, UserPreferences


class UserPreferencesStore(SingleRecordStore[UserPreferences]):
    key = StorageKeys.USER_PREFERENCES
    model = UserPreferences


class AppSettingsStore(SingleRecordStore[AppSettings]):
    """App settings.

    ``first_launch_date`` defaults to the time of the read until a settings
    record is stored.
    """

    key = StorageKeys.APP_SETTINGS
    model = AppSettings
