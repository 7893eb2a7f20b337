"""
Request orchestration for video summarization.

One request moves through these stages:

1. validating           - extract the video ID from the URL
2. fetching_metadata    - read title, channel and statistics from YouTube
3. fetching_transcript  - read the spoken content
4. generating           - summary and timeline run concurrently
5. responding           - assemble the SummaryResult

Stages 1-3 are terminal on failure. Once metadata and transcript are in
hand, a failed summary call no longer fails the request: a templated
summary and a duration-based timeline are returned instead, flagged as
fallback content.
"""
import asyncio
from typing import Optional

from loguru import logger

from app.core.constants import FallbackConfig
from app.core.exceptions import (
    InvalidVideoUrlError,
    MissingVideoUrlError,
    SummaryGenerationError,
    TranscriptNotFoundError,
    VideoNotFoundError,
)
from app.models import ContentSource, SummaryMode, SummaryResult, TimelineItem, TimelineResult, VideoMetadata
from app.services.summarization import SummarizationService
from app.services.timeline import TimelineService
from app.services.transcript import TranscriptFetcher
from app.services.url_parser import extract_video_id
from app.services.youtube import YouTubeService
from app.utils.formatting import format_duration, format_summary_html, format_view_count, parse_iso_duration, seconds_to_time


def build_fallback_summary(metadata: VideoMetadata) -> str:
    """Templated summary built from the video's metadata alone."""
    channel = metadata.channel_title or "an unknown channel"
    lines = [
        f"1. {metadata.title}",
        f"This video was published by {channel}.",
        "",
        "2. Video details",
        f"- Channel: {channel}",
    ]
    duration = format_duration(metadata.duration)
    if duration:
        lines.append(f"- Length: {duration}")
    if metadata.view_count is not None:
        lines.append(f"- Views: {format_view_count(metadata.view_count)}")
    lines.extend([
        "",
        "An AI summary could not be generated right now. Please try again later.",
    ])
    return "\n".join(lines)


def build_fallback_timeline(metadata: VideoMetadata) -> list[TimelineItem]:
    """Chapter markers at fixed fractions of the video's duration."""
    total = parse_iso_duration(metadata.duration) or FallbackConfig.ESTIMATED_DURATION_SECONDS
    items = [
        TimelineItem(time="00:00", title="Introduction", description=f"Start of \"{metadata.title}\"."),
    ]
    labels = ("Early section", "Midpoint", "Closing section")
    for fraction, label in zip(FallbackConfig.MARKERS, labels):
        items.append(
            TimelineItem(
                time=seconds_to_time(total * fraction),
                title=label,
                description=f"Around {int(fraction * 100)}% of the video.",
            )
        )
    return items


class VideoSummaryService:
    """
    Orchestrates URL parsing, metadata and transcript retrieval, and
    summary/timeline generation for a single request.
    """

    def __init__(
        self,
        youtube_service: YouTubeService,
        transcript_fetcher: TranscriptFetcher,
        summarization_service: SummarizationService,
        timeline_service: TimelineService,
        generation_timeout: Optional[float] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            youtube_service: Metadata fetcher.
            transcript_fetcher: Transcript source.
            summarization_service: Summary generator.
            timeline_service: Timeline generator.
            generation_timeout: Per-call timeout passed to both generators
                (None uses each generator's default).
        """
        self.youtube_service = youtube_service
        self.transcript_fetcher = transcript_fetcher
        self.summarization_service = summarization_service
        self.timeline_service = timeline_service
        self.generation_timeout = generation_timeout

    async def summarize(
        self,
        video_url: Optional[str],
        summary_type: Optional[str] = None,
        generate_timeline: bool = False,
    ) -> SummaryResult:
        """
        Produce a summary (and optionally a timeline) for a YouTube URL.

        Raises:
            MissingVideoUrlError: No URL was supplied.
            InvalidVideoUrlError: The URL is not a recognised YouTube URL.
            VideoNotFoundError: Metadata could not be retrieved.
            TranscriptNotFoundError: The transcript is empty.
        """
        if not video_url or not video_url.strip():
            raise MissingVideoUrlError()

        mode = SummaryMode.parse(summary_type)

        logger.info(f"[validating] {video_url}")
        video_id = extract_video_id(video_url)
        if not video_id:
            raise InvalidVideoUrlError()

        logger.info(f"[fetching_metadata] {video_id}")
        metadata = await self.youtube_service.get_video_details(video_id)
        if metadata is None:
            raise VideoNotFoundError()

        logger.info(f"[fetching_transcript] {video_id}")
        transcript = await self.transcript_fetcher.fetch_transcript(video_id)
        if not transcript or not transcript.strip():
            raise TranscriptNotFoundError()

        logger.info(f"[generating] {video_id} mode={mode.value} timeline={generate_timeline}")
        summary, summary_source, timeline = await self._generate(
            transcript, metadata, mode, generate_timeline
        )

        logger.info(
            f"[responding] {video_id} summary={summary_source.value}"
            + (f" timeline={timeline.source.value}" if timeline else "")
        )
        return SummaryResult(
            summary=summary,
            summary_html=format_summary_html(summary),
            summary_source=summary_source,
            video_details=metadata,
            timeline=timeline.items if timeline else None,
            timeline_source=timeline.source if timeline else None,
        )

    async def _generate(
        self,
        transcript: str,
        metadata: VideoMetadata,
        mode: SummaryMode,
        generate_timeline: bool,
    ) -> tuple[str, ContentSource, Optional[TimelineResult]]:
        """Run summary and timeline generation concurrently."""
        summary_task = asyncio.create_task(
            self.summarization_service.generate_summary(
                transcript, metadata.title, mode, timeout=self.generation_timeout
            )
        )
        timeline_task = None
        if generate_timeline:
            timeline_task = asyncio.create_task(
                self.timeline_service.generate_timeline(
                    transcript, metadata.title, mode, timeout=self.generation_timeout
                )
            )

        try:
            summary = await summary_task
        except SummaryGenerationError as e:
            logger.warning(f"Summary generation failed for {metadata.id}, using fallback content: {e}")
            timeline = None
            if timeline_task is not None:
                timeline_task.cancel()
                timeline = TimelineResult(
                    items=build_fallback_timeline(metadata),
                    source=ContentSource.FALLBACK,
                )
            return build_fallback_summary(metadata), ContentSource.FALLBACK, timeline
        except BaseException:
            if timeline_task is not None:
                timeline_task.cancel()
            raise

        timeline = await timeline_task if timeline_task is not None else None
        return summary, ContentSource.GENERATED, timeline
