"""
API endpoints for video summarization.
"""
import asyncio
import time

from fastapi import APIRouter, Depends
from loguru import logger

from app.api.dependencies import get_video_summary_service
from app.core.config import settings
from app.core.exceptions import AppException, GatewayTimeoutError, InternalServerError
from app.models.api import SummarizeRequest, SummaryResult
from app.services.video_summary import VideoSummaryService


router = APIRouter()


@router.post(
    "/summarize",
    response_model=SummaryResult,
    response_model_exclude_none=True,
)
async def summarize_video(
    payload: SummarizeRequest,
    video_summary_service: VideoSummaryService = Depends(get_video_summary_service),
):
    """
    Summarizes a YouTube video and optionally builds a chapter timeline.

    Args:
        payload: Request body with ``videoUrl``, ``summaryType`` and ``generateTimeline``.
        video_summary_service: The orchestrator handling the business logic.

    Returns:
        SummaryResult: Summary text, video details and the optional timeline.
    """
    logger.info(
        f"Incoming summarize request for URL: {payload.video_url} "
        f"(type={payload.summary_type}, timeline={payload.generate_timeline})"
    )

    start_time = time.perf_counter()
    try:
        result = await asyncio.wait_for(
            video_summary_service.summarize(
                payload.video_url,
                payload.summary_type,
                payload.generate_timeline,
            ),
            timeout=settings.REQUEST_TIMEOUT,
        )
    except AppException:
        raise
    except asyncio.TimeoutError:
        logger.error(f"Summarization exceeded {settings.REQUEST_TIMEOUT}s for {payload.video_url}")
        raise GatewayTimeoutError()
    except Exception as e:
        logger.exception(f"Error processing request for {payload.video_url}: {e}")
        raise InternalServerError()

    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s (degraded={result.degraded})")
    return result
