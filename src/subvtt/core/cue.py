"""Editable cue list model."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from subvtt.core.timecode import (
    FormatError,
    format_seconds,
    is_well_formed_timecode,
    parse_timecode,
)

if TYPE_CHECKING:
    from subvtt.formats.vtt import ParsedCue


@dataclass
class Cue:
    """Single subtitle cue.

    ``index`` is the position the cue had when it was created and is not
    renumbered when the owning list changes. ``editing`` and ``highlight``
    are editor state and never serialized.
    """

    index: int
    start: str
    end: str
    text: str
    editing: bool = False
    highlight: bool = False

    @property
    def start_time(self) -> float:
        """Start in seconds, derived from ``start``."""
        return parse_timecode(self.start)

    @property
    def end_time(self) -> float:
        """End in seconds, derived from ``end``."""
        return parse_timecode(self.end)

    @property
    def duration(self) -> str:
        """Length in seconds formatted to three decimal places."""
        return f"{self.end_time - self.start_time:.3f}"


class CueList:
    """Ordered collection of cues in display order.

    Overlap flags depend on list position, so they are recomputed on every
    read rather than stored on the cues.
    """

    def __init__(self, cues: Iterable[Cue] = ()) -> None:
        self._cues: list[Cue] = list(cues)

    @classmethod
    def from_parsed(cls, parsed: Iterable[ParsedCue]) -> CueList:
        """Build a fresh list from parsed cues, numbering them by position."""
        return cls(
            Cue(
                index=position,
                start=format_seconds(item.start),
                end=format_seconds(item.end),
                text=item.text,
            )
            for position, item in enumerate(parsed)
        )

    def __len__(self) -> int:
        """Return number of cues."""
        return len(self._cues)

    def __iter__(self) -> Iterator[Cue]:
        """Iterate over cues in order."""
        return iter(self._cues)

    def __getitem__(self, position: int) -> Cue:
        """Get cue by position (0-based)."""
        return self._cues[position]

    def overlapping(self, position: int) -> bool:
        """Return whether the cue at position starts before the previous one ends."""
        cue = self._cues[position]
        if position <= 0:
            return False
        previous = self._cues[position - 1]
        return cue.start_time < previous.end_time

    def overlaps(self) -> list[bool]:
        """Return the overlap flag of every cue, in order."""
        return [self.overlapping(position) for position in range(len(self._cues))]

    def add(self, start: str, end: str, text: str) -> Cue:
        """Append a new cue; its index is the list length at creation."""
        _check_timecode("start", start)
        _check_timecode("end", end)
        cue = Cue(index=len(self._cues), start=start, end=end, text=text)
        self._cues.append(cue)
        return cue

    def insert(self, position: int, cue: Cue) -> None:
        """Insert an existing cue before position."""
        self._cues.insert(position, cue)

    def remove(self, position: int) -> Cue:
        """Remove and return the cue at position."""
        return self._cues.pop(position)

    def move(self, source: int, target: int) -> None:
        """Move the cue at source so that it ends up at target."""
        cue = self._cues.pop(source)
        self._cues.insert(target, cue)

    def update(
        self,
        position: int,
        *,
        start: str | None = None,
        end: str | None = None,
        text: str | None = None,
    ) -> Cue:
        """Edit fields of the cue at position.

        Timecodes must be well formed (``H:MM:SS.mmm``); the cue is left
        untouched if any of them is rejected.

        Raises:
            FormatError: If start or end is not a well-formed timecode
            IndexError: If position is out of range
        """
        cue = self._cues[position]
        if start is not None:
            _check_timecode("start", start)
        if end is not None:
            _check_timecode("end", end)

        if start is not None:
            cue.start = start
        if end is not None:
            cue.end = end
        if text is not None:
            cue.text = text
        return cue

    def clear_flags(self) -> None:
        """Reset editing and highlight state on every cue."""
        for cue in self._cues:
            cue.editing = False
            cue.highlight = False


def _check_timecode(field: str, value: str) -> None:
    if not is_well_formed_timecode(value):
        raise FormatError(f"Invalid {field} timecode '{value}', expected HH:MM:SS.mmm")
