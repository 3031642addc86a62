"""Exception handlers mapping neo-upload errors to JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...config.logging_config import get_logger
from ...core.exceptions import NeoUploadError, create_error_response, get_http_status_code

logger = get_logger(__name__)


async def neo_upload_exception_handler(request: Request, exc: NeoUploadError) -> JSONResponse:
    """Render a neo-upload exception as a structured error response."""
    status_code = get_http_status_code(exc)

    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")

    return JSONResponse(status_code=status_code, content=create_error_response(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register neo-upload exception handlers on a FastAPI app."""
    app.add_exception_handler(NeoUploadError, neo_upload_exception_handler)
