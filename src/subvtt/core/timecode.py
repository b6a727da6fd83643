"""Timecode conversion between ``HH:MM:SS.mmm`` strings and seconds."""

import math
import re

# [D.]H:MM[:SS[.fff]] -- two fields read as hours and minutes
_CLOCK_PATTERN = re.compile(r"^(?:(\d+)\.)?(\d+):(\d+)(?::(\d+)(?:\.(\d*))?)?$")

_NUMBER = r"(\d+(?:\.\d+)?)"
_ISO_PATTERN = re.compile(
    rf"^P(?:{_NUMBER}D)?(?:T(?:{_NUMBER}H)?(?:{_NUMBER}M)?(?:{_NUMBER}S)?)?$",
    re.IGNORECASE,
)

_WELL_FORMED_TIMECODE = re.compile(r"\d+:[0-5]\d:[0-5]\d\.\d{3}")
_WELL_FORMED_SRT_DURATION = re.compile(r"\d+\.\d{3}")

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR


class FormatError(Exception):
    """Raised when a timecode or subtitle text cannot be interpreted."""


def parse_timecode(text: str) -> float:
    """Parse a duration expression into seconds.

    Accepts the clock form ``[D.]H:MM[:SS[.fff]]`` and ISO-8601 durations
    such as ``PT1H2M3.5S``. Fractional seconds are rounded to the nearest
    millisecond.

    Args:
        text: Duration expression

    Returns:
        Seconds as float with millisecond precision

    Raises:
        FormatError: If text is not a duration expression
    """
    if not isinstance(text, str):
        raise FormatError(f"Timecode must be a string, got {type(text).__name__}")

    value = text.strip()

    match = _CLOCK_PATTERN.match(value)
    if match:
        days, hours, minutes, seconds, fraction = match.groups()
        total_ms = (
            int(days or 0) * _MS_PER_DAY
            + int(hours) * _MS_PER_HOUR
            + int(minutes) * _MS_PER_MINUTE
            + int(seconds or 0) * _MS_PER_SECOND
            + _fraction_to_ms(fraction)
        )
        return total_ms / _MS_PER_SECOND

    match = _ISO_PATTERN.match(value)
    if match and any(match.groups()) and not value.upper().endswith("T"):
        days, hours, minutes, seconds = (float(g or 0) for g in match.groups())
        total_ms = round(
            days * _MS_PER_DAY
            + hours * _MS_PER_HOUR
            + minutes * _MS_PER_MINUTE
            + seconds * _MS_PER_SECOND
        )
        return total_ms / _MS_PER_SECOND

    raise FormatError(f"Invalid timecode '{text}'")


def format_seconds(seconds: float) -> str:
    """Format seconds as a canonical ``HH:MM:SS.mmm`` timecode.

    Every unit is kept, even when zero. Hours grow beyond two digits
    instead of rolling over into days.

    Raises:
        FormatError: If seconds is negative or not a finite number
    """
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise FormatError(f"Seconds must be a number, got {seconds!r}")
    if not math.isfinite(seconds) or seconds < 0:
        raise FormatError(f"Seconds must be finite and non-negative, got {seconds}")

    total_ms = round(seconds * _MS_PER_SECOND)
    hours, remainder = divmod(total_ms, _MS_PER_HOUR)
    minutes, remainder = divmod(remainder, _MS_PER_MINUTE)
    secs, millis = divmod(remainder, _MS_PER_SECOND)

    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def is_well_formed_timecode(text: str) -> bool:
    """Check text is exactly ``H+:MM:SS.mmm``, as required for edited fields."""
    return isinstance(text, str) and _WELL_FORMED_TIMECODE.fullmatch(text) is not None


def is_well_formed_srt_duration(text: str) -> bool:
    """Check text starts with ``digits.mmm``."""
    return isinstance(text, str) and _WELL_FORMED_SRT_DURATION.match(text) is not None


def _fraction_to_ms(fraction: str | None) -> int:
    if not fraction:
        return 0
    return round(float(f"0.{fraction}") * _MS_PER_SECOND)
