"""Middleware logging every request with a short request id."""
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from doc_catalog.core.logging import get_logger
from doc_catalog.utils.request_id import generate_request_id, validate_request_id

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, URL, status and timing; echo the request id in X-Request-ID."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Reuse a well-formed incoming request id, otherwise generate one
        request_id = request.headers.get("x-request-id")
        if not validate_request_id(request_id):
            request_id = generate_request_id()
        request.state.request_id = request_id

        logger.info(f"[{request_id}] {request.method} {request.url}")
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"[{request_id}] Request failed after {process_time:.4f}s: {str(e)}",
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"[{request_id}] {response.status_code} {request.method} {request.url.path} "
            f"({process_time:.4f}s)"
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response
