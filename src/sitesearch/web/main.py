import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from sitesearch.web.config import settings
from sitesearch.web.middleware.request_logging import RequestLoggingMiddleware
from sitesearch.web.routers import search, search_api, system
from sitesearch.web.services import search_engine


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self' 'unsafe-inline';"
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load in the background; searches before it completes find nothing
    load_task = asyncio.create_task(search_engine.load())
    yield
    load_task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await load_task
    search_engine.teardown()


app = FastAPI(
    lifespan=lifespan,
    title="Site Search",
    version="0.1.0",
    description="Title/content search over a pre-built page index.",
    openapi_tags=[
        {"name": "search", "description": "Search endpoints"},
        {"name": "system", "description": "Health checks"},
        {"name": "ui", "description": "Web UI endpoints"},
    ],
)

# --- Middleware (order matters: last added = first executed) ---
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

# UI routes (no /api/v1 prefix)
app.include_router(search.router, tags=["ui"])

# API routes with /api/v1 prefix
app.include_router(search_api.router, prefix="/api/v1", tags=["search"])
app.include_router(system.router, prefix="/api/v1", tags=["system"])


def run(host: str | None = None, port: int | None = None) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(
        "sitesearch.web.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
