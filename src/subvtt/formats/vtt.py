"""WebVTT serialization and cue parsing."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from subvtt.core.cue import Cue, CueList
from subvtt.core.timecode import FormatError, format_seconds, parse_timecode

VTT_HEADER = "WEBVTT\n\n"

_SIGNATURE = re.compile(r"^\ufeff?WEBVTT(?:[ \t].*)?$")
_BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")
# Hours are optional in WebVTT timestamps; cue settings may follow the end time
_TIMING_PATTERN = re.compile(
    r"^(?:(\d+):)?(\d{2}):(\d{2})\.(\d{3})[ \t]+-->[ \t]+"
    r"(?:(\d+):)?(\d{2}):(\d{2})\.(\d{3})(?:[ \t].*)?$"
)


@dataclass(frozen=True)
class ParsedCue:
    """Cue timing and text as produced by a VTT parser."""

    start: float  # seconds
    end: float  # seconds
    text: str


class VttCueParser(Protocol):
    """Anything able to turn WebVTT text into an ordered cue sequence."""

    def parse_cues(self, source: str) -> Sequence[ParsedCue]: ...


class WebVttCueParser:
    """Parse cues out of WebVTT text the way a media text track would.

    Blocks without a valid timing line (header metadata, NOTE, STYLE,
    REGION, malformed cues) are skipped rather than rejected.
    """

    def parse_cues(self, source: str) -> list[ParsedCue]:
        """Parse WebVTT text into cues.

        Raises:
            FormatError: If the text does not start with the WEBVTT signature
        """
        lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if not _SIGNATURE.match(lines[0]):
            raise FormatError("Missing WEBVTT signature")

        body = "\n".join(lines[1:])
        cues = []
        for block in _BLOCK_SEPARATOR.split(body):
            block_lines = block.strip("\n").split("\n")

            # Timing is the first line, or the second after a cue identifier
            for i, line in enumerate(block_lines[:2]):
                match = _TIMING_PATTERN.match(line.strip())
                if match:
                    break
            else:
                continue

            groups = match.groups()
            cues.append(
                ParsedCue(
                    start=_timestamp_to_seconds(*groups[:4]),
                    end=_timestamp_to_seconds(*groups[4:]),
                    text="\n".join(block_lines[i + 1 :]),
                )
            )

        return cues


def _timestamp_to_seconds(
    hours: str | None, minutes: str, seconds: str, millis: str
) -> float:
    total_ms = (
        int(hours or 0) * 3_600_000
        + int(minutes) * 60_000
        + int(seconds) * 1000
        + int(millis)
    )
    return total_ms / 1000


def cue_list_to_vtt(cues: Iterable[Cue]) -> str:
    """Serialize cues to WebVTT text.

    Cues are numbered by their current position (1-based), not by their
    stored ``index``. Editor flags are not written.

    Raises:
        FormatError: If a cue has an unparseable start or end
    """
    blocks = []
    for position, cue in enumerate(cues, start=1):
        start = format_seconds(parse_timecode(cue.start))
        end = format_seconds(parse_timecode(cue.end))
        blocks.append(f"{position}\n{start} --> {end}\n{cue.text}")

    return VTT_HEADER + "\n\n".join(blocks)


def vtt_to_cue_list(source: str, parser: VttCueParser | None = None) -> CueList:
    """Load WebVTT text into a fresh, editable cue list.

    Args:
        source: WebVTT text
        parser: Cue parser to use, defaults to WebVttCueParser

    Returns:
        CueList with cues indexed by parse order

    Raises:
        FormatError: If the parser rejects the source
    """
    parser = parser or WebVttCueParser()
    return CueList.from_parsed(parser.parse_cues(source))
