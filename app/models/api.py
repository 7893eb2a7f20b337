"""
Pydantic models for API request/response schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import ContentSource
from app.models.youtube import TimelineItem, VideoMetadata


class SummarizeRequest(BaseModel):
    """Request body for video summarization."""

    video_url: Optional[str] = None
    summary_type: Optional[str] = "brief"
    generate_timeline: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryResult(BaseModel):
    """Complete response for one summarization request."""

    summary: str
    summary_html: str
    summary_source: ContentSource
    video_details: VideoMetadata
    timeline: Optional[List[TimelineItem]] = None
    timeline_source: Optional[ContentSource] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def degraded(self) -> bool:
        """True when any part of the response came from a fallback path."""
        return ContentSource.FALLBACK in (self.summary_source, self.timeline_source)


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    project: str
