"""
HTTP Middleware
===============

Request interceptors wrapped around every route.

Registered in ``create_application`` so that ErrorHandlingMiddleware sits
outside RequestLoggingMiddleware: a failing request is logged with status
500 and then answered with a generic body.
"""
import logging
import time

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and elapsed time of every request."""
    
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn any unhandled exception into a 500 without leaking details."""
    
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )
