"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from dreamweaver.api.v1.endpoints import data, insights, journal, preferences, sleep, user

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    user.router, prefix="/user", tags=["User"]
)
api_router.include_router(
    sleep.router, prefix="/sleep/sessions", tags=["Sleep sessions"]
)
api_router.include_router(
    journal.router, prefix="/journal/entries", tags=["Journal entries"]
)
api_router.include_router(
    insights.router, prefix="/insights", tags=["Coaching insights"]
)
api_router.include_router(
    preferences.router, tags=["Preferences and settings"]
)
api_router.include_router(
    data.router, prefix="/data", tags=["Data management"]
)
