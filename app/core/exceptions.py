"""
Custom exception classes and JSON error handling.

Every error that reaches the client is rendered as ``{"error": "<message>"}``
with the matching HTTP status code.
"""
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict
from starlette.exceptions import HTTPException as StarletteHTTPException


class ErrorResponse(BaseModel):
    """Error body returned to API clients."""
    error: str

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


class BadRequestError(AppException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            error_type="bad-request",
            title="Bad Request",
            detail=detail,
        )


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=404,
            error_type="not-found",
            title="Resource Not Found",
            detail=detail,
        )


class MethodNotAllowedError(AppException):
    """HTTP method not supported by the endpoint."""

    def __init__(self, detail: str = "Method not allowed."):
        super().__init__(
            status_code=405,
            error_type="method-not-allowed",
            title="Method Not Allowed",
            detail=detail,
        )


class InternalServerError(AppException):
    """Internal server error exception."""

    def __init__(self, detail: str = "An error occurred while generating the summary."):
        super().__init__(
            status_code=500,
            error_type="internal-error",
            title="Internal Server Error",
            detail=detail,
        )


class GatewayTimeoutError(AppException):
    """The request exceeded its overall time budget."""

    def __init__(self, detail: str = "The request timed out. Please try again later."):
        super().__init__(
            status_code=504,
            error_type="timeout",
            title="Gateway Timeout",
            detail=detail,
        )


# --- Domain errors ---

class MissingVideoUrlError(BadRequestError):
    def __init__(self):
        super().__init__("No video URL provided.")


class InvalidVideoUrlError(BadRequestError):
    def __init__(self):
        super().__init__("Not a valid YouTube URL.")


class VideoNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Video not found.")


class TranscriptNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Transcript not found.")


class SummaryGenerationError(Exception):
    """
    Raised by the summary generator when the text-generation call fails,
    times out or returns no content.

    Never rendered to clients: the orchestrator recovers with fallback content.
    """


# --- Handlers ---

def create_error_response(status_code: int, detail: str) -> JSONResponse:
    """Create a JSON error response."""
    error = ErrorResponse(error=detail)
    return JSONResponse(status_code=status_code, content=error.model_dump())


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and its subclasses."""
    logger.info(f"{exc.title} on {request.url.path}: {exc.detail}")
    return create_error_response(exc.status_code, exc.detail)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies as 400 errors."""
    errors = exc.errors()
    for err in errors:
        if tuple(err.get("loc", ())) == ("body", "videoUrl"):
            return create_error_response(400, MissingVideoUrlError().detail)

    first = errors[0] if errors else {}
    message = first.get("msg", "Invalid request body.")
    logger.info(f"Rejected request body on {request.url.path}: {message}")
    return create_error_response(400, f"Invalid request: {message}")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (404/405) in the same shape as application errors."""
    if exc.status_code == 405:
        return create_error_response(405, MethodNotAllowedError().detail)
    return create_error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the traceback and hide details from the client."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}: {exc}")
    return create_error_response(500, InternalServerError().detail)
