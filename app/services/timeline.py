"""
Timeline (chapter list) generation for a single video transcript.

The TimelineService asks the LLM for a JSON chapter list and validates it.
It never raises: when the call fails or the payload cannot be parsed, a
deterministic fallback timeline is returned and marked as such.
"""
import asyncio
import json
import random
import re
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError

from app.core.constants import GenerationConfig, TimelineConfig
from app.core.prompts import TimelinePrompts
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.models import ContentSource, LLMRole, SummaryMode, TimelineItem, TimelineResult
from app.utils.formatting import seconds_to_time

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)

BRIEF_FALLBACK_TIMELINE = (
    TimelineItem(time="00:00", title="Introduction", description="The video introduces its topic."),
    TimelineItem(time="01:30", title="Background", description="Context and background for the main topic."),
    TimelineItem(time="03:00", title="Main content", description="The core ideas of the video are presented."),
    TimelineItem(time="05:00", title="Examples", description="Practical examples illustrate the main ideas."),
    TimelineItem(time="07:00", title="Conclusion", description="A recap of the key points and closing remarks."),
)


class TimelineParseError(ValueError):
    """The LLM payload is not a usable timeline."""


def target_item_count(mode: SummaryMode | str | None) -> int:
    """Number of chapters expected for a mode: 5 for brief, 20 otherwise."""
    if SummaryMode.parse(mode) == SummaryMode.BRIEF:
        return TimelineConfig.BRIEF_ITEM_COUNT
    return TimelineConfig.DEFAULT_ITEM_COUNT


def parse_timeline(payload: Optional[str], count: int) -> list[TimelineItem]:
    """
    Parse a JSON timeline payload.

    Accepts ``{"timeline": [...]}`` or a bare list, optionally wrapped in a
    Markdown code fence. Items beyond ``count`` are dropped.

    Raises:
        TimelineParseError: Payload missing, not JSON, wrong shape, invalid
            timestamps, or fewer than ``count`` items.
    """
    if not payload or not payload.strip():
        raise TimelineParseError("empty payload")

    text = payload.strip()
    fenced = _CODE_FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise TimelineParseError(f"invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("timeline")
    if not isinstance(data, list):
        raise TimelineParseError("payload has no timeline list")

    try:
        items = [TimelineItem.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise TimelineParseError(f"invalid timeline item: {e.errors()[0].get('msg')}") from e

    if len(items) < count:
        raise TimelineParseError(f"expected {count} items, got {len(items)}")

    return items[:count]


def fallback_timeline(mode: SummaryMode | str | None, rng: Optional[random.Random] = None) -> list[TimelineItem]:
    """
    Placeholder timeline used when generation or parsing fails.

    Brief mode gets a fixed five-item list. Other modes get twenty sections
    spaced a few minutes apart with a random seconds component.
    """
    if SummaryMode.parse(mode) == SummaryMode.BRIEF:
        return list(BRIEF_FALLBACK_TIMELINE)

    rng = rng or random.Random()
    items = []
    for index in range(TimelineConfig.DEFAULT_ITEM_COUNT):
        seconds = 0 if index == 0 else rng.randint(0, 59)
        start = index * TimelineConfig.FALLBACK_MINUTES_PER_SECTION * 60 + seconds
        items.append(
            TimelineItem(
                time=seconds_to_time(start),
                title=f"Section {index + 1}",
                description=f"Key point {index + 1} of the video.",
            )
        )
    return items


class TimelineService:
    """
    Generates chapter timelines with an injected LLM provider.
    """

    def __init__(self, llm_provider: LLMProvider, default_timeout: float = 45.0):
        self.llm_provider = llm_provider
        self.default_timeout = default_timeout

    async def generate_timeline(
        self,
        transcript: str,
        title: str,
        mode: SummaryMode | str | None = SummaryMode.BRIEF,
        timeout: Optional[float] = None,
    ) -> TimelineResult:
        """
        Generate an ordered list of chapters for the video.

        Args:
            transcript: Full transcript text.
            title: Video title, included in the prompt.
            mode: Summary style; selects the chapter count and output budget.
            timeout: Seconds to wait for the provider (defaults to default_timeout).

        Returns:
            TimelineResult with GENERATED items, or FALLBACK items on any failure.
        """
        summary_mode = SummaryMode.parse(mode)
        count = target_item_count(summary_mode)
        max_tokens = (
            TimelineConfig.BRIEF_MAX_TOKENS
            if summary_mode == SummaryMode.BRIEF
            else TimelineConfig.DEFAULT_MAX_TOKENS
        )
        limit = timeout if timeout is not None else self.default_timeout

        messages = [
            LLMMessage(role=LLMRole.SYSTEM, content=TimelinePrompts.system_instructions(count)),
            LLMMessage(role=LLMRole.USER, content=TimelinePrompts.user_message(title, transcript)),
        ]

        logger.info(f"Generating {count}-item timeline for '{title}'")

        try:
            response = await asyncio.wait_for(
                self.llm_provider.generate_text(
                    messages=messages,
                    temperature=GenerationConfig.TEMPERATURE,
                    max_tokens=max_tokens,
                    json_mode=True,
                ),
                timeout=limit,
            )
            items = parse_timeline(response.content, count)
        except asyncio.TimeoutError:
            logger.warning(f"Timeline generation timed out after {limit}s, using fallback")
        except TimelineParseError as e:
            logger.warning(f"Could not parse timeline payload ({e}), using fallback")
        except Exception as e:
            logger.warning(f"Timeline generation failed ({e!r}), using fallback")
        else:
            return TimelineResult(items=items, source=ContentSource.GENERATED)

        return TimelineResult(items=fallback_timeline(summary_mode), source=ContentSource.FALLBACK)
