"""Pytest configuration and shared fixtures."""

import pytest

from subedit.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_vtt_content() -> str:
    """Return a two-cue WebVTT document without header."""
    return (
        "00:00:01.000 --> 00:00:02.000\n"
        "Hello\n"
        "\n"
        "00:00:03.000 --> 00:00:04.000\n"
        "World\n"
    )


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""


@pytest.fixture
def sample_ass_content() -> str:
    """Return an ASS script with two dialogue lines."""
    return """[Script Info]
Title: Sample
ScriptType: v4.00+

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Hello
Dialogue: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,World
"""
