"""
X-Correlation-ID handling.

The id comes from the caller (the frontend sends one per onboarding step)
or is generated here. It lives in a contextvar while the request is served
and is echoed on the response.
"""
import contextvars
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from careerlens.utils.logger import get_logger

HEADER = "X-Correlation-ID"

correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("correlation_id", default="")
logger = get_logger("http")


def get_correlation_id() -> str:
    return correlation_id_var.get()


def _elapsed_ms(start: float) -> int:
    return round((time.monotonic() - start) * 1000)


class CorrelationMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        cid = request.headers.get(HEADER) or uuid.uuid4().hex
        token = correlation_id_var.set(cid)
        start = time.monotonic()
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "",
        }

        try:
            response = await call_next(request)
            status = response.status_code
            # 4xx is routine here (rejected goals, missing quiz answers)
            log = logger.warning if status >= 500 else logger.info
            log(
                f"{request.method} {request.url.path} -> {status}",
                extra={**fields, "status": status, "duration_ms": _elapsed_ms(start)},
            )
        except Exception as exc:
            logger.error(
                f"{request.method} {request.url.path} failed",
                extra={
                    **fields,
                    "duration_ms": _elapsed_ms(start),
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            raise
        finally:
            correlation_id_var.reset(token)

        response.headers[HEADER] = cid
        return response
