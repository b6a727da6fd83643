"""ASS (Advanced SubStation Alpha) to WebVTT converter."""

import re

import structlog

from subvtt.core.timecode import FormatError, format_seconds, parse_timecode

logger = structlog.get_logger()

DEFAULT_EVENT_FORMAT = [
    "Layer",
    "Start",
    "End",
    "Style",
    "Name",
    "MarginL",
    "MarginR",
    "MarginV",
    "Effect",
    "Text",
]

_OVERRIDE_BLOCK = re.compile(r"\{([^}]*)\}")
_STYLE_TAG = re.compile(r"\\([biu])(\d*)(?=\\|$)")


def ass_to_vtt(content: str) -> str:
    """Convert ASS text to WebVTT text.

    Emits one cue per ``Dialogue:`` event, in file order. Only bold,
    italic and underline overrides survive, as ``<b>``, ``<i>`` and
    ``<u>``; every other override is dropped.

    Args:
        content: ASS format string content

    Returns:
        WebVTT text

    Raises:
        FormatError: If there is no [Events] section or an event has an
            invalid time
    """
    events = _read_events(content)

    blocks = []
    for line_num, fields in events:
        text = _convert_text(fields.get("text", ""))
        if not text.strip():
            continue
        try:
            start = format_seconds(parse_timecode(fields.get("start", "")))
            end = format_seconds(parse_timecode(fields.get("end", "")))
        except FormatError as e:
            raise FormatError(f"Line {line_num}: {e}") from e
        blocks.append(f"{start} --> {end}\n{text}")

    logger.debug("ass_converted", events=len(events), cues=len(blocks))

    if not blocks:
        return "WEBVTT\n"
    return "WEBVTT\n\n" + "\n\n".join(blocks) + "\n"


def _read_events(content: str) -> list[tuple[int, dict[str, str]]]:
    """Collect Dialogue events as field-name -> value mappings.

    Field names are lowercased. The text field is split last so that it
    may contain commas.
    """
    section: str | None = None
    seen_events = False
    format_fields = [f.lower() for f in DEFAULT_EVENT_FORMAT]
    events = []

    for line_num, line in enumerate(content.splitlines(), start=1):
        stripped = line.strip().lstrip("\ufeff")

        if stripped.startswith("[") and stripped.endswith("]"):
            section = stripped.lower()
            if section == "[events]":
                seen_events = True
            continue

        if section != "[events]" or not stripped or stripped.startswith(";"):
            continue

        if stripped.lower().startswith("format:"):
            format_fields = [f.strip().lower() for f in stripped[7:].split(",")]
            continue

        # Comment: events are never shown
        if not stripped.lower().startswith("dialogue:"):
            continue

        event_str = stripped[9:].strip()
        if "text" in format_fields:
            values = event_str.split(",", format_fields.index("text"))
        else:
            values = event_str.split(",")
        events.append(
            (
                line_num,
                dict(zip(format_fields, (v.strip() for v in values), strict=False)),
            )
        )

    if not seen_events:
        raise FormatError("No [Events] section found in ASS content")

    return events


def _convert_text(text: str) -> str:
    """Map ASS event text to WebVTT cue text."""
    text = _OVERRIDE_BLOCK.sub(_convert_override_block, text)
    text = text.replace("\\N", "\n").replace("\\n", "\n")
    text = text.replace("\\h", " ")
    return text.strip()


def _convert_override_block(match: re.Match[str]) -> str:
    tags = []
    for tag in _STYLE_TAG.finditer(match.group(1)):
        name, value = tag.groups()
        if value and int(value) != 0:
            tags.append(f"<{name}>")
        else:
            tags.append(f"</{name}>")
    return "".join(tags)
