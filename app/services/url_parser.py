"""
Extraction of YouTube video IDs from user supplied URLs.
"""
import re
from typing import Optional

# Tried in order; the first captured ID wins.
VIDEO_URL_PATTERNS = (
    # https://www.youtube.com/watch?v=ID&t=10s (v may appear after other params)
    re.compile(r"^https?://(?:www\.)?youtube\.com/watch\?(?:\S*?&)?v=([A-Za-z0-9_-]+)(?:[&#]\S*)?$"),
    # https://www.youtube.com/embed/ID?start=5
    re.compile(r"^https?://(?:www\.)?youtube\.com/embed/([A-Za-z0-9_-]+)(?:[/?#]\S*)?$"),
    # https://www.youtube.com/v/ID
    re.compile(r"^https?://(?:www\.)?youtube\.com/v/([A-Za-z0-9_-]+)(?:[/?#]\S*)?$"),
    # https://youtu.be/ID?si=...
    re.compile(r"^https?://youtu\.be/([A-Za-z0-9_-]+)(?:[/?#]\S*)?$"),
    # https://www.youtube.com/shorts/ID?feature=share
    re.compile(r"^https?://(?:www\.)?youtube\.com/shorts/([A-Za-z0-9_-]+)(?:[/?#]\S*)?$"),
)


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Supports watch, embed, legacy ``/v/``, ``youtu.be`` and shorts URLs over
    http or https. Never raises.

    Args:
        url: Raw user input.

    Returns:
        The video ID, or None if the input is not a recognised YouTube URL.
    """
    if not url or not isinstance(url, str):
        return None

    candidate = url.strip()
    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.match(candidate)
        if match and match.group(1):
            return match.group(1)

    return None
