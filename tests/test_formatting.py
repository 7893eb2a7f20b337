"""
Unit tests for formatting helpers.
"""
import pytest

from app.utils.formatting import (
    format_duration,
    format_summary_html,
    format_view_count,
    parse_iso_duration,
    seconds_to_time,
    time_to_seconds,
)


@pytest.mark.parametrize(
    "iso, expected",
    [
        ("PT3M33S", 213),
        ("PT1H2M3S", 3723),
        ("PT45S", 45),
        ("PT2H", 7200),
        ("P1DT1S", 86401),
    ],
)
def test_parse_iso_duration(iso, expected):
    assert parse_iso_duration(iso) == expected


@pytest.mark.parametrize("iso", [None, "", "PT", "3:33", "garbage"])
def test_parse_iso_duration_invalid(iso):
    assert parse_iso_duration(iso) is None


def test_format_duration():
    assert format_duration("PT3M5S") == "3:05"
    assert format_duration("PT1H2M3S") == "1:02:03"
    assert format_duration(None) == ""


def test_format_view_count():
    assert format_view_count(1234567) == "1,234,567"
    assert format_view_count("1500") == "1,500"
    assert format_view_count(None) == "0"


def test_seconds_to_time_does_not_wrap_hours():
    assert seconds_to_time(0) == "00:00"
    assert seconds_to_time(213.9) == "03:33"
    assert seconds_to_time(3723) == "62:03"


def test_time_to_seconds():
    assert time_to_seconds("03:33") == 213
    assert time_to_seconds("3:05") == 185
    assert time_to_seconds("62:03") == 3723
    assert time_to_seconds("1:02:03") == 3723


@pytest.mark.parametrize("value", ["", "abc", "03:75", "-1:00", "1:60:00", "12"])
def test_time_to_seconds_invalid(value):
    with pytest.raises(ValueError):
        time_to_seconds(value)


def test_format_summary_html():
    summary = "1. Main topic\n- First point\n• Second point\n\nConclusion"
    html = format_summary_html(summary)

    assert '<h4 class="summary-heading">Main topic</h4>' in html
    assert '<li class="summary-item">First point</li>' in html
    assert '<li class="summary-item">Second point</li>' in html
    assert '<div class="summary-spacer"></div>' in html


def test_format_summary_html_escapes_markup():
    html = format_summary_html("<script>alert(1)</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
