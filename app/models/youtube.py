from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.enums import ContentSource
from app.utils.formatting import seconds_to_time, time_to_seconds

# --- Internal Parsing Models (YouTube Data API v3) ---

class ApiSnippet(BaseModel):
    title: str
    description: Optional[str] = None
    channelTitle: Optional[str] = None
    publishedAt: Optional[str] = None

    model_config = ConfigDict(extra='ignore')

class ApiContentDetails(BaseModel):
    duration: Optional[str] = None

    model_config = ConfigDict(extra='ignore')

class ApiStatistics(BaseModel):
    viewCount: Optional[int] = None
    likeCount: Optional[int] = None
    commentCount: Optional[int] = None

    model_config = ConfigDict(extra='ignore')

class ApiVideoItem(BaseModel):
    id: Optional[str] = None
    snippet: ApiSnippet
    contentDetails: ApiContentDetails = Field(default_factory=ApiContentDetails)
    statistics: ApiStatistics = Field(default_factory=ApiStatistics)

    model_config = ConfigDict(extra='ignore')

class ApiVideoListResponse(BaseModel):
    items: List[ApiVideoItem] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class VideoMetadata(BaseModel):
    """Read-only snapshot of a video's details, fetched once per request."""

    id: str
    title: str
    description: Optional[str] = None
    channel_title: Optional[str] = None
    published_at: Optional[str] = None
    duration: Optional[str] = None  # ISO 8601, e.g. PT12M3S
    view_count: Optional[int] = None
    like_count: Optional[int] = None
    comment_count: Optional[int] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_api_item(cls, video_id: str, item: ApiVideoItem) -> "VideoMetadata":
        return cls(
            id=video_id,
            title=item.snippet.title,
            description=item.snippet.description,
            channel_title=item.snippet.channelTitle,
            published_at=item.snippet.publishedAt,
            duration=item.contentDetails.duration,
            view_count=item.statistics.viewCount,
            like_count=item.statistics.likeCount,
            comment_count=item.statistics.commentCount,
        )

class TimelineItem(BaseModel):
    """One chapter marker. ``time`` is normalised to ``mm:ss``."""

    time: str
    title: str
    description: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator('time')
    @classmethod
    def validate_time(cls, v: str) -> str:
        return seconds_to_time(time_to_seconds(v))

    @property
    def seconds(self) -> int:
        return time_to_seconds(self.time)

class TimelineResult(BaseModel):
    items: List[TimelineItem]
    source: ContentSource

    model_config = ConfigDict(frozen=True)

    @property
    def degraded(self) -> bool:
        return self.source == ContentSource.FALLBACK
