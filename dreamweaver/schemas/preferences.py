"""
User preference and app settings schemas.

Both are single-record configuration objects.  Every field carries its
default so a partially stored record always resolves to a complete one.
"""

from typing import Literal, Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant, utcnow


class NotificationPreferences(CamelModel):
    morning_reminder: bool = True
    evening_reminder: bool = True
    insight_notifications: bool = True


class SleepGoals(CamelModel):
    target_duration: int = Field(480, ge=0, description="Target duration in minutes")
    target_quality: int = Field(80, ge=0, le=100, description="Target quality percentage")


class PrivacyPreferences(CamelModel):
    share_insights: bool = False
    analytics_enabled: bool = True


class UserPreferences(CamelModel):
    """Notification flags, sleep goals, privacy flags and theme."""

    notifications: NotificationPreferences = Field(default_factory=NotificationPreferences)
    sleep_goals: SleepGoals = Field(default_factory=SleepGoals)
    privacy: PrivacyPreferences = Field(default_factory=PrivacyPreferences)
    theme: Literal["dark", "light", "auto"] = "dark"


class UserPreferencesUpdate(CamelModel):
    """Partial update; nested groups are replaced whole."""

    notifications: Optional[NotificationPreferences] = None
    sleep_goals: Optional[SleepGoals] = None
    privacy: Optional[PrivacyPreferences] = None
    theme: Optional[Literal["dark", "light", "auto"]] = None


class AppSettings(CamelModel):
    """Application bookkeeping."""

    onboarding_completed: bool = False
    last_sync_date: Optional[Instant] = None
    version: str = "1.0.0"
    first_launch_date: Instant = Field(default_factory=utcnow)


class AppSettingsUpdate(CamelModel):
    onboarding_completed: Optional[bool] = None
    last_sync_date: Optional[Instant] = None
    version: Optional[str] = None
