"""
Coaching insight generator.

Sends one chat-completion request (OpenRouter-compatible API) built from a
night of sleep and returns the recommendation text.  It never raises: with
no API key configured, or on any failure, the fixed fallback
recommendation is returned.
"""

import logging
from typing import Optional

import httpx

from dreamweaver.core.config import Settings, settings as default_settings
from dreamweaver.schemas.coaching_insight import InsightRequest

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = "Focus on maintaining consistent sleep schedule and creating a relaxing bedtime routine."

_SYSTEM_PROMPT = (
    "You are a supportive sleep coach. Give one short, specific and actionable "
    "recommendation (two sentences at most) based on the user's night."
)


def build_prompt(request: InsightRequest) -> str:
    hours, minutes = divmod(request.duration, 60)
    activities = ", ".join(request.activities) if request.activities else "none logged"
    return (
        f"Sleep duration: {hours}h {minutes}m\n"
        f"Sleep quality: {request.quality}/100\n"
        f"Activities before bed: {activities}\n"
        f"Pre-sleep notes: {request.pre_notes or '-'}\n"
        f"Post-sleep notes: {request.post_notes or '-'}"
    )


class InsightGenerator:
    """Request/response client for the text-generation endpoint."""

    def __init__(self, config: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or default_settings
        self.transport = transport

    async def generate(self, request: InsightRequest) -> str:
        if not self.config.INSIGHT_API_KEY:
            return FALLBACK_INSIGHT

        payload = {
            "model": self.config.INSIGHT_MODEL,
            "max_tokens": self.config.INSIGHT_MAX_TOKENS,
            "temperature": self.config.INSIGHT_TEMPERATURE,
            "messages": [
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(request)},
            ],
        }
        headers = {"Authorization": f"Bearer {self.config.INSIGHT_API_KEY}"}

        try:
            async with httpx.AsyncClient(base_url=self.config.INSIGHT_API_URL,
                                         timeout=self.config.INSIGHT_TIMEOUT_SECONDS,
                                         transport=self.transport, ) as client:
                response = await client.post("/chat/completions", json=payload, headers=headers)
                response.raise_for_status()
                content = response.json()["choices"][0]["message"]["content"].strip()
        except (httpx.HTTPError, KeyError, IndexError, TypeError, AttributeError, ValueError) as exc:
            logger.warning("Insight generation failed, using fallback: %s", exc)
            return FALLBACK_INSIGHT

        return content or FALLBACK_INSIGHT
