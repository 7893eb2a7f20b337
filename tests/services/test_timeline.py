import asyncio
import json
import random

import pytest
from unittest.mock import AsyncMock

from app.core.providers.llm_provider import LLMProvider
from app.models import ContentSource, SummaryMode
from app.services.timeline import (
    BRIEF_FALLBACK_TIMELINE,
    TimelineParseError,
    TimelineService,
    fallback_timeline,
    parse_timeline,
    target_item_count,
)
from tests.conftest import llm_response, make_timeline_payload


@pytest.fixture
def provider():
    return AsyncMock(spec=LLMProvider)


@pytest.fixture
def timeline_service(provider):
    return TimelineService(llm_provider=provider)


def test_target_item_count():
    assert target_item_count(SummaryMode.BRIEF) == 5
    assert target_item_count("unknown") == 5
    for mode in (SummaryMode.DETAILED, SummaryMode.BULLET, SummaryMode.ELI5, SummaryMode.ACADEMIC):
        assert target_item_count(mode) == 20


# --- parse_timeline ---

def test_parse_object_payload():
    items = parse_timeline(make_timeline_payload(5), 5)
    assert [item.title for item in items] == [f"Chapter {i}" for i in range(1, 6)]
    assert items[0].time == "00:00"


def test_parse_bare_list_and_code_fence():
    payload = "```json\n" + json.dumps(json.loads(make_timeline_payload(5))["timeline"]) + "\n```"
    assert len(parse_timeline(payload, 5)) == 5


def test_parse_truncates_extra_items():
    assert len(parse_timeline(make_timeline_payload(8), 5)) == 5


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "",
        "not json",
        '{"chapters": []}',
        '{"timeline": "nope"}',
        '{"timeline": [{"time": "xx", "title": "a", "description": "b"}]}',
        '{"timeline": [{"title": "missing time"}]}',
    ],
)
def test_parse_rejects_malformed(payload):
    with pytest.raises(TimelineParseError):
        parse_timeline(payload, 1)


def test_parse_rejects_too_few_items():
    with pytest.raises(TimelineParseError):
        parse_timeline(make_timeline_payload(3), 5)


# --- fallback_timeline ---

def test_brief_fallback_is_fixed():
    assert fallback_timeline(SummaryMode.BRIEF) == list(BRIEF_FALLBACK_TIMELINE)
    assert len(BRIEF_FALLBACK_TIMELINE) == 5


def test_extended_fallback_has_twenty_ordered_items():
    items = fallback_timeline(SummaryMode.DETAILED, rng=random.Random(7))

    assert len(items) == 20
    assert items[0].time == "00:00"
    assert [item.title for item in items] == [f"Section {i}" for i in range(1, 21)]
    seconds = [item.seconds for item in items]
    assert seconds == sorted(seconds)
    for index, item in enumerate(items):
        assert item.seconds // 60 == index * 3


# --- TimelineService ---

@pytest.mark.asyncio
@pytest.mark.parametrize("mode, count", [(SummaryMode.BRIEF, 5), (SummaryMode.DETAILED, 20)])
async def test_generate_timeline_success(timeline_service, provider, mode, count):
    provider.generate_text.return_value = llm_response(make_timeline_payload(count))

    result = await timeline_service.generate_timeline("t", "Title", mode)

    assert result.source == ContentSource.GENERATED
    assert len(result.items) == count
    _, kwargs = provider.generate_text.call_args
    assert kwargs["json_mode"] is True
    assert kwargs["temperature"] == 0.5
    assert f"exactly {count} chapters" in kwargs["messages"][0].content
    assert kwargs["max_tokens"] == (800 if mode == SummaryMode.BRIEF else 2500)


@pytest.mark.asyncio
@pytest.mark.parametrize("mode, count", [("brief", 5), ("academic", 20), ("eli5", 20)])
async def test_unparsable_output_falls_back(timeline_service, provider, mode, count):
    provider.generate_text.return_value = llm_response("Sorry, I cannot do that.")

    result = await timeline_service.generate_timeline("t", "Title", mode)

    assert result.source == ContentSource.FALLBACK
    assert result.degraded
    assert len(result.items) == count


@pytest.mark.asyncio
async def test_provider_error_falls_back(timeline_service, provider):
    provider.generate_text.side_effect = RuntimeError("boom")

    result = await timeline_service.generate_timeline("t", "Title", "bullet")

    assert result.source == ContentSource.FALLBACK
    assert len(result.items) == 20


@pytest.mark.asyncio
async def test_timeout_falls_back(timeline_service, provider):
    async def slow(*args, **kwargs):
        await asyncio.sleep(5)

    provider.generate_text.side_effect = slow

    result = await timeline_service.generate_timeline("t", "Title", "brief", timeout=0.05)

    assert result.source == ContentSource.FALLBACK
    assert len(result.items) == 5
