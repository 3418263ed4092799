"""
Coaching insight repository.
"""

from typing import Iterable

from dreamweaver.db.kv_store import StorageKeys
from dreamweaver.db.repositories.base import CollectionRepository
from dreamweaver.schemas.coaching_insight import CoachingInsight


def most_recent(insights: Iterable[CoachingInsight], limit: int) -> list[CoachingInsight]:
    """The *limit* newest insights by ``generated_at``, newest first.

    The sort is stable, so insights generated at the same instant keep
    their insertion order.
    """
    ordered = sorted(insights, key=lambda insight: insight.generated_at, reverse=True)
    return ordered[:max(limit, 0)]


class CoachingInsightRepository(CollectionRepository[CoachingInsight]):
    """Repository for CoachingInsight records."""

    key = StorageKeys.COACHING_INSIGHTS
    model = CoachingInsight
    id_field = "insight_id"

    def get_by_session_id(self, session_id: str) -> list[CoachingInsight]:
        return self._filter(lambda insight: insight.session_id == session_id)

    def get_recent(self, limit: int = 10) -> list[CoachingInsight]:
        return most_recent(self.get_all(), limit)
