"""
Tests for the YouTube metadata fetcher.
"""
import httpx
import pytest

from app.services.youtube import YouTubeService
from tests.conftest import VIDEO_ID, make_api_item


def make_service(handler) -> YouTubeService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YouTubeService(api_key="secret", base_url="https://yt.example/v3/", client=client)


@pytest.mark.asyncio
async def test_get_video_details_success(youtube_service, youtube_requests):
    metadata = await youtube_service.get_video_details(VIDEO_ID)

    assert metadata is not None
    assert metadata.id == VIDEO_ID
    assert metadata.title == "Never Gonna Give You Up"
    assert metadata.channel_title == "Rick Astley"
    assert metadata.like_count == 17_000_000

    assert len(youtube_requests) == 1
    params = youtube_requests[0].url.params
    assert params["id"] == VIDEO_ID
    assert params["part"] == "snippet,contentDetails,statistics"
    assert params["key"] == "test-key"


@pytest.mark.asyncio
async def test_builds_url_from_base(youtube_requests):
    def handler(request):
        youtube_requests.append(request)
        return httpx.Response(200, json={"items": [make_api_item()]})

    await make_service(handler).get_video_details(VIDEO_ID)
    assert str(youtube_requests[0].url).startswith("https://yt.example/v3/videos?")


@pytest.mark.asyncio
async def test_empty_items_returns_none(youtube_service, api_items):
    api_items.clear()
    assert await youtube_service.get_video_details(VIDEO_ID) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 403, 404, 500, 503])
async def test_error_status_returns_none(status):
    service = make_service(lambda request: httpx.Response(status, json={"error": {}}))
    assert await service.get_video_details(VIDEO_ID) is None


@pytest.mark.asyncio
async def test_network_error_returns_none():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert await make_service(handler).get_video_details(VIDEO_ID) is None


@pytest.mark.asyncio
async def test_timeout_returns_none():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    assert await make_service(handler).get_video_details(VIDEO_ID) is None


@pytest.mark.asyncio
async def test_invalid_json_returns_none():
    service = make_service(lambda request: httpx.Response(200, text="<html>oops</html>"))
    assert await service.get_video_details(VIDEO_ID) is None


@pytest.mark.asyncio
async def test_item_without_snippet_returns_none():
    service = make_service(lambda request: httpx.Response(200, json={"items": [{"id": VIDEO_ID}]}))
    assert await service.get_video_details(VIDEO_ID) is None
