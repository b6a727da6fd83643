"""Subtitle format converters."""

from subvtt.formats.ass import ass_to_vtt
from subvtt.formats.srt import srt_to_vtt, strip_directives
from subvtt.formats.vtt import (
    ParsedCue,
    VttCueParser,
    WebVttCueParser,
    cue_list_to_vtt,
    vtt_to_cue_list,
)

__all__ = [
    "ParsedCue",
    "VttCueParser",
    "WebVttCueParser",
    "ass_to_vtt",
    "cue_list_to_vtt",
    "srt_to_vtt",
    "strip_directives",
    "vtt_to_cue_list",
]
