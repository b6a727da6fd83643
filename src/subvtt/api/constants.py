"""Constants for the API layer."""

VTT_MEDIA_TYPE = "text/vtt"

UPLOAD_CHUNK_BYTES = 64 * 1024
