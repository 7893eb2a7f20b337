"""
Shared pytest fixtures and configuration.
"""
import json

import httpx
import pytest
from unittest.mock import AsyncMock

from app.main import app
from app.api.dependencies import get_llm_provider, get_youtube_service, get_transcript_fetcher
from app.core.providers.llm_provider import LLMProvider, LLMResponse
from app.services.transcript import PlaceholderTranscriptFetcher
from app.services.youtube import YouTubeService


VIDEO_ID = "dQw4w9WgXcQ"


def make_api_item(video_id: str = VIDEO_ID) -> dict:
    """A videos.list item as returned by the YouTube Data API."""
    return {
        "kind": "youtube#video",
        "id": video_id,
        "snippet": {
            "title": "Never Gonna Give You Up",
            "description": "The official video.",
            "channelTitle": "Rick Astley",
            "publishedAt": "2009-10-25T06:57:33Z",
        },
        "contentDetails": {"duration": "PT3M33S"},
        "statistics": {
            "viewCount": "1500000000",
            "likeCount": "17000000",
            "commentCount": "2300000",
        },
    }


def make_timeline_payload(count: int) -> str:
    return json.dumps({
        "timeline": [
            {"time": f"{i:02d}:{(i * 7) % 60:02d}", "title": f"Chapter {i + 1}", "description": f"Part {i + 1}."}
            for i in range(count)
        ]
    })


def llm_response(content: str) -> LLMResponse:
    return LLMResponse(content=content, model="test-model")


@pytest.fixture
def api_items():
    """Items returned by the mocked YouTube API. Tests may clear or replace them."""
    return [make_api_item()]


@pytest.fixture
def youtube_requests():
    """Requests received by the mocked YouTube API."""
    return []


@pytest.fixture
def youtube_service(api_items, youtube_requests):
    """YouTubeService backed by an in-process mock transport."""
    def handler(request: httpx.Request) -> httpx.Response:
        youtube_requests.append(request)
        return httpx.Response(200, json={"kind": "youtube#videoListResponse", "items": api_items})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YouTubeService(api_key="test-key", client=client)


@pytest.fixture
def mock_llm_provider():
    """
    LLM provider mock. Free-text calls return a summary, JSON-mode calls
    return a valid timeline sized from the requested chapter count.
    """
    provider = AsyncMock(spec=LLMProvider)

    async def generate_text(messages, temperature=0.7, max_tokens=None, json_mode=False):
        if json_mode:
            count = 5 if "exactly 5 chapters" in messages[0].content else 20
            return llm_response(make_timeline_payload(count))
        return llm_response("1. Main topic\n- First point\n- Second point\n\nA short conclusion.")

    provider.generate_text.side_effect = generate_text
    return provider


@pytest.fixture
def override_dependencies(mock_llm_provider, youtube_service):
    """Override FastAPI dependencies for testing."""
    app.dependency_overrides[get_llm_provider] = lambda: mock_llm_provider
    app.dependency_overrides[get_youtube_service] = lambda: youtube_service
    app.dependency_overrides[get_transcript_fetcher] = lambda: PlaceholderTranscriptFetcher()

    yield

    app.dependency_overrides.clear()
