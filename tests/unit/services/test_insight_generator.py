"""Tests for the coaching insight generator."""

import json

import httpx
import pytest

from dreamweaver.core.config import Settings
from dreamweaver.schemas.coaching_insight import InsightRequest
from dreamweaver.services.insight_generator import FALLBACK_INSIGHT, InsightGenerator, build_prompt

REQUEST = InsightRequest(user_id="u1", duration=450, quality=72, pre_notes="wired", post_notes="groggy",
                         activities=["caffeine"])


def _config(**overrides) -> Settings:
    return Settings(INSIGHT_API_KEY="test-key", INSIGHT_API_URL="https://llm.test/api/v1", **overrides)


def _transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


class TestPrompt:
    def test_includes_night_details(self):
        prompt = build_prompt(REQUEST)
        assert "7h 30m" in prompt
        assert "72/100" in prompt
        assert "caffeine" in prompt
        assert "groggy" in prompt

    def test_no_activities(self):
        assert "none logged" in build_prompt(InsightRequest(user_id="u1", duration=0, quality=0))


@pytest.mark.anyio
class TestGenerate:
    async def test_without_api_key_returns_fallback(self):
        calls = []
        generator = InsightGenerator(Settings(INSIGHT_API_KEY=None), transport=_transport(calls.append))
        assert await generator.generate(REQUEST) == FALLBACK_INSIGHT
        assert calls == []

    async def test_returns_completion_content(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"choices": [{"message": {"content": "  Skip the late coffee.  "}}]})

        generator = InsightGenerator(_config(), transport=_transport(handler))
        assert await generator.generate(REQUEST) == "Skip the late coffee."

        request = seen[0]
        assert str(request.url) == "https://llm.test/api/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer test-key"
        body = json.loads(request.content)
        assert body["max_tokens"] == 200
        assert body["messages"][-1]["content"] == build_prompt(REQUEST)

    async def test_error_status_returns_fallback(self):
        generator = InsightGenerator(_config(), transport=_transport(lambda request: httpx.Response(500)))
        assert await generator.generate(REQUEST) == FALLBACK_INSIGHT

    async def test_malformed_payload_returns_fallback(self):
        generator = InsightGenerator(_config(), transport=_transport(
            lambda request: httpx.Response(200, json={"choices": []})))
        assert await generator.generate(REQUEST) == FALLBACK_INSIGHT

    async def test_transport_error_returns_fallback(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        generator = InsightGenerator(_config(), transport=_transport(handler))
        assert await generator.generate(REQUEST) == FALLBACK_INSIGHT

    async def test_empty_content_returns_fallback(self):
        generator = InsightGenerator(_config(), transport=_transport(
            lambda request: httpx.Response(200, json={"choices": [{"message": {"content": "   "}}]})))
        assert await generator.generate(REQUEST) == FALLBACK_INSIGHT
