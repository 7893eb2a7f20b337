"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. The LLM provider is selected based on config.
"""
from functools import lru_cache

from fastapi import Depends

from app.core.config import settings
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.llm_provider import LLMProvider
from app.core.providers.openai_provider import OpenAIProvider
from app.models.enums import LLMProviderType
from app.services.summarization import SummarizationService
from app.services.timeline import TimelineService
from app.services.transcript import PlaceholderTranscriptFetcher, TranscriptFetcher
from app.services.video_summary import VideoSummaryService
from app.services.youtube import YouTubeService


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_llm_provider() -> LLMProvider:
    """
    Get LLM provider for summary and timeline generation.

    Default: OpenAI (configured in settings.SUMMARY_LLM_PROVIDER)
    """
    provider_type = settings.SUMMARY_LLM_PROVIDER

    if provider_type == LLMProviderType.OPENAI:
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.GROQ:
        return GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model_name=settings.GROQ_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model_name=settings.GEMINI_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_youtube_service() -> YouTubeService:
    """Get YouTube service for video metadata."""
    return YouTubeService(
        api_key=settings.YOUTUBE_API_KEY,
        base_url=settings.YOUTUBE_API_URL,
        timeout=settings.YOUTUBE_API_TIMEOUT,
    )


@lru_cache
def get_transcript_fetcher() -> TranscriptFetcher:
    """Get transcript source. Only the placeholder implementation ships."""
    return PlaceholderTranscriptFetcher()


def get_summarization_service(
    llm_provider: LLMProvider = Depends(get_llm_provider),
) -> SummarizationService:
    """Get summary generator."""
    return SummarizationService(
        llm_provider=llm_provider,
        default_timeout=settings.GENERATION_TIMEOUT,
    )


def get_timeline_service(
    llm_provider: LLMProvider = Depends(get_llm_provider),
) -> TimelineService:
    """Get timeline generator."""
    return TimelineService(
        llm_provider=llm_provider,
        default_timeout=settings.GENERATION_TIMEOUT,
    )


def get_video_summary_service(
    youtube_service: YouTubeService = Depends(get_youtube_service),
    transcript_fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
    summarization_service: SummarizationService = Depends(get_summarization_service),
    timeline_service: TimelineService = Depends(get_timeline_service),
) -> VideoSummaryService:
    """
    Get the request orchestrator.

    Wires together:
    - YouTubeService for metadata
    - TranscriptFetcher for spoken content
    - SummarizationService and TimelineService for generation
    """
    return VideoSummaryService(
        youtube_service=youtube_service,
        transcript_fetcher=transcript_fetcher,
        summarization_service=summarization_service,
        timeline_service=timeline_service,
    )
