"""API error hierarchy."""


class ApiError(Exception):
    """Base API error with HTTP status code and structured detail."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class InvalidRequestError(ApiError):
    """Raised when the client sends an invalid request."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(
            status_code=422,
            code="invalid_request",
            message=message,
            detail=detail,
        )


class ConversionError(ApiError):
    """Raised when subtitle text cannot be converted."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(
            status_code=422,
            code="format_error",
            message=message,
            detail=detail,
        )


class SourceUnavailableError(ApiError):
    """Raised when a remote subtitle source cannot be fetched."""

    def __init__(self, url: str, *, detail: str | None = None) -> None:
        super().__init__(
            status_code=502,
            code="source_unavailable",
            message=f"Could not fetch subtitles from {url}",
            detail=detail,
        )
