"""Core subtitle model and timecode handling."""

from subvtt.core.cue import Cue, CueList
from subvtt.core.timecode import (
    FormatError,
    format_seconds,
    is_well_formed_srt_duration,
    is_well_formed_timecode,
    parse_timecode,
)

__all__ = [
    "Cue",
    "CueList",
    "FormatError",
    "format_seconds",
    "is_well_formed_srt_duration",
    "is_well_formed_timecode",
    "parse_timecode",
]
