"""API route definitions."""

from __future__ import annotations

import httpx
import structlog
from fastapi import APIRouter, UploadFile
from fastapi.responses import Response

from subvtt.api.constants import UPLOAD_CHUNK_BYTES, VTT_MEDIA_TYPE
from subvtt.api.errors import (
    ConversionError,
    InvalidRequestError,
    SourceUnavailableError,
)
from subvtt.api.schemas import (
    CueListResponse,
    CueParseRequest,
    CueSerializeRequest,
    UrlConvertRequest,
)
from subvtt.core import FormatError
from subvtt.core.ingest import (
    convert_to_vtt,
    detect_subtitle_type,
    read_subtitle_from_url,
)
from subvtt.formats import cue_list_to_vtt, vtt_to_cue_list
from subvtt.utils.config import get_settings

router = APIRouter(prefix="/api")
logger = structlog.get_logger()


def _vtt_response(text: str) -> Response:
    return Response(content=text, media_type=VTT_MEDIA_TYPE)


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@router.post("/convert/upload")
async def convert_upload(file: UploadFile) -> Response:
    """Convert an uploaded SRT, ASS or VTT file to WebVTT."""
    settings = get_settings()
    filename = file.filename or ""
    log = logger.bind(filename=filename)

    # Read with size limit
    raw = bytearray()
    while chunk := await file.read(UPLOAD_CHUNK_BYTES):
        raw.extend(chunk)
        if len(raw) > settings.max_upload_bytes:
            raise InvalidRequestError(
                "File too large",
                detail=f"Maximum file size is {settings.max_upload_bytes} bytes",
            )

    try:
        text = raw.decode(settings.subtitle_encoding)
    except UnicodeDecodeError as e:
        raise InvalidRequestError(
            "Could not decode subtitle file",
            detail=f"Expected {settings.subtitle_encoding} text: {e}",
        ) from e

    subtitle_type = detect_subtitle_type(filename)
    try:
        vtt = convert_to_vtt(text, subtitle_type)
    except FormatError as e:
        log.warning("upload_conversion_failed", error=str(e))
        raise ConversionError("Could not convert subtitle file", detail=str(e)) from e

    log.info("upload_converted", subtitle_type=subtitle_type, bytes=len(raw))
    return _vtt_response(vtt)


@router.post("/convert/url")
async def convert_url(body: UrlConvertRequest) -> Response:
    """Fetch a remote subtitle file and convert it to WebVTT."""
    settings = get_settings()
    url = str(body.url)

    try:
        async with httpx.AsyncClient(
            timeout=settings.fetch_timeout_seconds, follow_redirects=True
        ) as client:
            vtt = await read_subtitle_from_url(url, client=client)
    except httpx.HTTPError as e:
        logger.warning("subtitle_fetch_failed", url=url, error=str(e))
        raise SourceUnavailableError(url, detail=str(e)) from e

    return _vtt_response(vtt)


@router.post("/cues/parse", response_model=CueListResponse)
async def parse_cues(body: CueParseRequest) -> CueListResponse:
    """Load WebVTT text into a cue list with derived timing fields."""
    try:
        cues = vtt_to_cue_list(body.vtt)
    except FormatError as e:
        raise ConversionError("Could not parse WebVTT text", detail=str(e)) from e

    logger.info("cues_parsed", count=len(cues))
    return CueListResponse.from_cue_list(cues)


@router.post("/cues/serialize")
async def serialize_cues(body: CueSerializeRequest) -> Response:
    """Serialize an edited cue list back to WebVTT."""
    return _vtt_response(cue_list_to_vtt(body.to_cue_list()))
