"""HTTP error bodies.

Routes raise ApiError with the exact JSON body the frontend reads (flat
``{"error": ..., "message": ...}``, not FastAPI's ``{"detail": ...}``).
Anything unexpected becomes a 500 carrying only the exception message.
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from careerlens.utils.logger import logger


class ApiError(Exception):
    def __init__(self, status_code: int, error: str, **fields: Any):
        self.status_code = status_code
        self.body: Dict[str, Any] = {"error": error, **fields}
        super().__init__(error)


def bad_request(error: str, **fields: Any) -> ApiError:
    return ApiError(400, error, **fields)


class UnhandledRouteError(Exception):
    """Wraps an unexpected failure with the route's user-facing error title."""

    def __init__(self, error: str, cause: BaseException):
        self.error = error
        self.cause = cause
        super().__init__(str(cause) or "An unknown error occurred")


def error_response(status_code: int, error: str, message: Optional[str] = None) -> JSONResponse:
    body = {"error": error}
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.body)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
        return error_response(400, "Invalid request body", "Request body must be a JSON object")

    @app.exception_handler(UnhandledRouteError)
    async def route_error_handler(request: Request, exc: UnhandledRouteError):
        logger.error(f"{exc.error}: {type(exc.cause).__name__}: {exc.cause}", exc_info=exc.cause)
        return error_response(500, exc.error, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return error_response(500, "Internal server error", str(exc) or "An unknown error occurred")
