"""
YouTube service for fetching video metadata from the YouTube Data API.
"""
from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from app.core.constants import YouTubeConfig
from app.models import ApiVideoListResponse, VideoMetadata


class YouTubeService:
    """
    Service for reading video details (snippet, content details and statistics)
    from the YouTube Data API v3.

    Failures are never raised to the caller. Any network error, timeout,
    non-2xx status or empty result yields None, and the caller decides how
    to report a missing video.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://www.googleapis.com/youtube/v3",
        timeout: float = 8.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the YouTubeService.

        Args:
            api_key: YouTube Data API key.
            base_url: API root, without trailing slash.
            timeout: Timeout in seconds for the metadata request.
            client: Optional shared HTTP client. When omitted a short-lived
                    client is opened for every call.
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def get_video_details(self, video_id: str) -> Optional[VideoMetadata]:
        """
        Fetch the metadata of a single video.

        Args:
            video_id: The YouTube video ID.

        Returns:
            VideoMetadata, or None if the video could not be retrieved.
        """
        params = {
            "id": video_id,
            "part": YouTubeConfig.VIDEO_PARTS,
            "key": self.api_key,
        }
        url = f"{self.base_url}/videos"

        try:
            if self._client is not None:
                response = await self._client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, params=params)
            response.raise_for_status()
            payload = ApiVideoListResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"YouTube API returned {e.response.status_code} for video {video_id}"
            )
            return None
        except httpx.HTTPError as e:
            logger.warning(f"YouTube API request failed for video {video_id}: {e!r}")
            return None
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unexpected YouTube API payload for video {video_id}: {e}")
            return None

        if not payload.items:
            logger.info(f"No video found for id {video_id}")
            return None

        metadata = VideoMetadata.from_api_item(video_id, payload.items[0])
        logger.info(f"Fetched metadata for {video_id}: '{metadata.title}' by {metadata.channel_title}")
        return metadata
