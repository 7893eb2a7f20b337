"""
Transcript retrieval.

Real caption extraction is an external integration. Implementations of
TranscriptFetcher return the concatenated caption text, or an empty string
when captions are unavailable or disabled, and never raise.
"""
from abc import ABC, abstractmethod

from loguru import logger


class TranscriptFetcher(ABC):
    """Interface for transcript sources."""

    @abstractmethod
    async def fetch_transcript(self, video_id: str) -> str:
        """
        Return the spoken content of a video.

        Args:
            video_id: The YouTube video ID.

        Returns:
            The transcript text, or "" if none is available.
        """
        ...


class PlaceholderTranscriptFetcher(TranscriptFetcher):
    """Stand-in that returns fixed text referencing the video ID."""

    TEMPLATE = (
        "This is the content of the YouTube video with ID {video_id}. "
        "A real deployment would retrieve the video's captions through the "
        "YouTube API or a captions service; placeholder text is used instead. "
        "The video covers a range of topics and gives viewers useful information. "
        "The creator explains the main concepts, walks through practical examples "
        "and presents the material so that it is easy to follow. "
        "The video also points to related resources and further learning material."
    )

    async def fetch_transcript(self, video_id: str) -> str:
        logger.debug(f"Using placeholder transcript for {video_id}")
        return self.TEMPLATE.format(video_id=video_id)
