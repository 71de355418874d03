"""
HTTP middleware utilities.

Propagates request IDs for structured logging and reports processing time.
"""
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from src.core.error_handling import request_id_var


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach request IDs and timing headers to every response."""

    async def dispatch(self, request: Request, call_next: Callable):
        incoming = request.headers.get("X-Request-ID") or request.headers.get("X-Correlation-ID")
        request_id = incoming or str(uuid.uuid4())
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{(time.perf_counter() - start_time) * 1000:.1f}ms"
        return response
