"""
Tests for the placeholder transcript source.
"""
import pytest

from app.services.transcript import PlaceholderTranscriptFetcher, TranscriptFetcher


@pytest.mark.asyncio
async def test_placeholder_references_video_id():
    fetcher = PlaceholderTranscriptFetcher()
    transcript = await fetcher.fetch_transcript("abc123")

    assert isinstance(fetcher, TranscriptFetcher)
    assert "abc123" in transcript
    assert transcript.strip()


def test_transcript_fetcher_is_abstract():
    with pytest.raises(TypeError):
        TranscriptFetcher()
