"""
Backend configuration and analytics schemas.
"""

from typing import Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant


class DatabaseConfig(CamelModel):
    """Provider tag plus connection details for remote providers."""

    provider: str = Field("local", description="'local', 'supabase', 'firebase' or a custom tag")
    api_url: Optional[str] = None
    api_key: Optional[str] = None
    project_id: Optional[str] = None


class BackendStatus(CamelModel):
    provider: str
    online: bool


class SleepStats(CamelModel):
    """Aggregates over an inclusive time range."""

    total_sessions: int
    average_duration: float = Field(..., description="Minutes")
    average_quality: float
    total_journal_entries: int


class SyncResult(CamelModel):
    success: bool
    last_sync_date: Optional[Instant] = None
