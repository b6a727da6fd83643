"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Generator

import pytest

from subvtt.utils.config import get_settings


@pytest.fixture
def temp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    yield tmp_path


@pytest.fixture
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear settings cache before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content with override tags."""
    return """1
00:00:01,000 --> 00:00:02,000
{\\i1}Hello{\\i}

2
00:00:02,000 --> 00:00:03,500
{b}Second{/b} subtitle{\\an8}
"""


@pytest.fixture
def sample_ass_content() -> str:
    """Return sample ASS content with one comment event."""
    return r"""[Script Info]
Title: Test
ScriptType: v4.00+

[V4+ Styles]
Format: Name, Fontname, Fontsize
Style: Default,Arial,20

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:02.50,Default,,0,0,0,,{\i1}Hello{\i0}, world
Comment: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,hidden
Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,{\an8\b1}Top{\b0}\NSecond line
"""


@pytest.fixture
def sample_vtt_content() -> str:
    """Return sample WebVTT content with an overlapping cue."""
    return """WEBVTT

1
00:00:00.000 --> 00:00:02.000
First

2
00:00:01.000 --> 00:00:03.000
Second
"""
