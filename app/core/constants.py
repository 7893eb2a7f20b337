"""
Application-wide constants.

Grouped into static classes for better namespace management and discoverability.
"""


class YouTubeConfig:
    """Configuration for the YouTube Data API."""
    VIDEO_PARTS = "snippet,contentDetails,statistics"


class GenerationConfig:
    """Sampling settings shared by the summary and timeline generators."""
    TEMPERATURE = 0.5


class TimelineConfig:
    """Timeline sizes and output budgets."""
    BRIEF_ITEM_COUNT = 5
    DEFAULT_ITEM_COUNT = 20
    BRIEF_MAX_TOKENS = 800
    DEFAULT_MAX_TOKENS = 2500
    FALLBACK_MINUTES_PER_SECTION = 3


class FallbackConfig:
    """Settings for the degraded response built when summary generation fails."""
    ESTIMATED_DURATION_SECONDS = 600  # used when the video duration is unknown
    MARKERS = (0.25, 0.5, 0.8)
