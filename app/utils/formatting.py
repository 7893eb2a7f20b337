"""
Formatting helpers for durations, timestamps, counts and summary markup.
"""
import html
import re
from typing import Optional, Union

_ISO_DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$"
)
_TIMESTAMP_RE = re.compile(r"^(?:(\d+):)?(\d+):(\d{1,2})$")


def parse_iso_duration(iso_duration: Optional[str]) -> Optional[int]:
    """
    Convert an ISO 8601 duration as returned by the YouTube Data API
    (e.g. ``PT1H2M3S``) to a number of seconds.

    Args:
        iso_duration: The duration string.

    Returns:
        Total seconds, or None if the value is empty or not a duration.
    """
    if not iso_duration:
        return None
    match = _ISO_DURATION_RE.match(iso_duration.strip())
    if not match or not any(match.groupdict().values()):
        return None
    parts = {k: int(v) if v else 0 for k, v in match.groupdict().items()}
    return (
        parts["days"] * 86400
        + parts["hours"] * 3600
        + parts["minutes"] * 60
        + parts["seconds"]
    )


def format_duration(iso_duration: Optional[str]) -> str:
    """
    Format an ISO 8601 duration as ``H:MM:SS`` (or ``M:SS`` under an hour).

    Returns an empty string for missing or unparsable input.
    """
    total = parse_iso_duration(iso_duration)
    if total is None:
        return ""
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_view_count(count: Union[int, str, None]) -> str:
    """Format a count with thousands separators (``1234567`` -> ``1,234,567``)."""
    if count is None or count == "":
        return "0"
    try:
        return f"{int(count):,}"
    except (TypeError, ValueError):
        return str(count)


def seconds_to_time(seconds: float) -> str:
    """Convert seconds to a ``mm:ss`` timestamp. Minutes are not wrapped into hours."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def time_to_seconds(timestamp: str) -> int:
    """
    Convert a ``mm:ss`` (or ``h:mm:ss``) timestamp to seconds.

    Raises:
        ValueError: If the value is not a valid timestamp.
    """
    match = _TIMESTAMP_RE.match(timestamp.strip()) if isinstance(timestamp, str) else None
    if not match:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")
    hours, minutes, seconds = match.groups()
    hours_value = int(hours) if hours else 0
    minutes_value = int(minutes)
    seconds_value = int(seconds)
    if seconds_value >= 60 or (hours and minutes_value >= 60):
        raise ValueError(f"Invalid timestamp: {timestamp!r}")
    return hours_value * 3600 + minutes_value * 60 + seconds_value


def format_summary_html(summary: str) -> str:
    """
    Render generated summary text as a small HTML fragment.

    Numbered lines become headings, ``-`` and ``•`` lines become list items
    and blank lines become spacers. Raw text is escaped first.
    """
    text = html.escape(summary or "")
    text = re.sub(r"^\d+\.\s(.*)$", r'<h4 class="summary-heading">\1</h4>', text, flags=re.MULTILINE)
    text = re.sub(r"^•\s(.*)$", r'<li class="summary-item">\1</li>', text, flags=re.MULTILINE)
    text = re.sub(r"^- (.*)$", r'<li class="summary-item">\1</li>', text, flags=re.MULTILINE)
    text = text.replace("\n\n", '<div class="summary-spacer"></div>')
    return text
