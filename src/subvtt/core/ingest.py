"""Read subtitle text from files or URLs and convert it to WebVTT."""

from __future__ import annotations

import asyncio
import re
from enum import StrEnum
from pathlib import Path

import httpx
import structlog

from subvtt.formats.ass import ass_to_vtt
from subvtt.formats.srt import srt_to_vtt, strip_directives

logger = structlog.get_logger()

_SUBRIP_CONTENT_TYPE = re.compile(r"x-subrip", re.IGNORECASE)


class SubtitleType(StrEnum):
    """Source subtitle formats recognised on ingestion."""

    SRT = "srt"
    ASS = "ass"
    VTT = "vtt"


def get_extension(name: str) -> str:
    """Return the lowercased text after the last dot of a file name.

    Characters such as ``?`` and ``#`` are part of the name. A name
    without a dot is returned whole.
    """
    return name.lower().rsplit(".", 1)[-1]


def detect_subtitle_type(filename: str) -> SubtitleType:
    """Detect source type from a file name; unknown extensions count as VTT."""
    extension = get_extension(filename)
    if extension == SubtitleType.SRT:
        return SubtitleType.SRT
    if extension == SubtitleType.ASS:
        return SubtitleType.ASS
    return SubtitleType.VTT


def convert_to_vtt(text: str, subtitle_type: SubtitleType) -> str:
    """Convert text of the given source type to WebVTT.

    Anything that is not SRT or ASS is assumed to be WebVTT already and only
    has its ``{...}`` directive blocks stripped.

    Raises:
        FormatError: If the ASS converter cannot interpret the text
    """
    if subtitle_type == SubtitleType.SRT:
        return srt_to_vtt(text)
    if subtitle_type == SubtitleType.ASS:
        return ass_to_vtt(text)
    return strip_directives(text)


async def read_subtitle_from_file(
    path: Path | str, *, encoding: str = "utf-8-sig"
) -> str:
    """Read a subtitle file and convert it to WebVTT by its extension.

    Args:
        path: Subtitle file path
        encoding: Text encoding of the file; the default drops a UTF-8 BOM

    Returns:
        WebVTT text

    Raises:
        OSError: If the file cannot be read (propagated unchanged)
        UnicodeDecodeError: If the content is not valid in the encoding
        FormatError: If the content cannot be converted
    """
    path = Path(path)
    subtitle_type = detect_subtitle_type(path.name)
    # Decode bytes directly so CRLF line endings reach the converter intact
    raw = await asyncio.to_thread(path.read_bytes)
    text = raw.decode(encoding)
    logger.info(
        "subtitle_file_read",
        path=str(path),
        subtitle_type=subtitle_type,
        chars=len(text),
    )
    return convert_to_vtt(text, subtitle_type)


async def read_subtitle_from_url(
    url: str, *, client: httpx.AsyncClient | None = None
) -> str:
    """Fetch subtitle text and convert it to WebVTT by its Content-Type.

    Responses served as ``x-subrip`` go through the SRT converter; any
    other body is returned unchanged. The status code is not checked.

    Args:
        url: Subtitle URL
        client: HTTP client to use; a temporary one is created if omitted

    Returns:
        WebVTT text (or the raw body for non-SubRip responses)

    Raises:
        httpx.HTTPError: If the request fails (propagated unchanged)
    """
    if client is None:
        async with httpx.AsyncClient(
            timeout=None, follow_redirects=True
        ) as own_client:
            response = await own_client.get(url)
    else:
        response = await client.get(url)

    content_type = response.headers.get("Content-Type", "")
    text = response.text
    logger.info(
        "subtitle_url_fetched",
        url=url,
        status_code=response.status_code,
        content_type=content_type,
        chars=len(text),
    )

    if _SUBRIP_CONTENT_TYPE.search(content_type):
        return srt_to_vtt(text)
    return text
