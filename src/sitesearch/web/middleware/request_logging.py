# Request Logging Middleware with Correlation IDs
# Adds request_id to each request for log correlation

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("sitesearch.api")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that:
    1. Assigns a unique request ID to each request (or reuses X-Request-ID)
    2. Logs completion with status, timing and query length
    3. Echoes the request ID in the response headers
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        started_at = time.perf_counter()

        log_extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        query = request.query_params.get("q")
        if query is not None:
            # Length only; queries are user text
            log_extra["query_len"] = len(query)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Request failed",
                extra={
                    **log_extra,
                    "duration_ms": self._elapsed_ms(started_at),
                    "error": str(e),
                },
            )
            raise

        logger.info(
            "Request completed",
            extra={
                **log_extra,
                "status_code": response.status_code,
                "duration_ms": self._elapsed_ms(started_at),
            },
        )
        response.headers["X-Request-ID"] = request_id
        return response

    @staticmethod
    def _elapsed_ms(started_at: float) -> float:
        return round((time.perf_counter() - started_at) * 1000, 2)
