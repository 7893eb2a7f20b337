from .enums import LLMRole, LLMProviderType, SummaryMode, ContentSource
from .youtube import ApiVideoListResponse, VideoMetadata, TimelineItem, TimelineResult
from .api import SummarizeRequest, SummaryResult, HealthResponse
