"""
Error handling utilities for verification operations.

This module provides custom exceptions, a route decorator, and FastAPI
exception handlers for consistent error handling across the application.
"""
import asyncio
import logging
import time
import uuid
from typing import Callable, TypeVar, ParamSpec
from functools import wraps
from contextvars import ContextVar

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Context variable for request ID tracking across async contexts
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Type variables for generic function signatures
P = ParamSpec('P')
T = TypeVar('T')


# ============================================================================
# Custom Exceptions
# ============================================================================

class VerificationServiceError(Exception):
    """Base exception for verification service errors."""
    pass


class TextValidationError(VerificationServiceError):
    """Submitted text was rejected."""
    pass


class ConfigurationError(VerificationServiceError):
    """Service not properly configured."""
    pass


# ============================================================================
# Error Handler Decorator
# ============================================================================

def _to_http_exception(
    exc: Exception,
    error_message: str,
    func_name: str,
    request_id: str,
    elapsed: float
) -> HTTPException:
    """Log an exception raised by a route and convert it to an HTTPException."""
    headers = {"X-Request-ID": request_id}

    if isinstance(exc, TextValidationError):
        logger.error(f"[{request_id}] {error_message} - Text validation error after {elapsed:.2f}s: {exc}")
        return HTTPException(status_code=400, detail=f"Text validation failed: {exc}", headers=headers)

    if isinstance(exc, ConfigurationError):
        logger.error(f"[{request_id}] {error_message} - Configuration error after {elapsed:.2f}s: {exc}")
        return HTTPException(status_code=500, detail=f"Service configuration error: {exc}", headers=headers)

    if isinstance(exc, VerificationServiceError):
        logger.error(f"[{request_id}] {error_message} - Verification error after {elapsed:.2f}s: {exc}")
        return HTTPException(status_code=400, detail=str(exc), headers=headers)

    if isinstance(exc, ValueError):
        logger.error(f"[{request_id}] {error_message} - Invalid value after {elapsed:.2f}s: {exc}")
        return HTTPException(status_code=400, detail=f"Invalid input: {exc}", headers=headers)

    logger.exception(
        f"[{request_id}] {error_message} - Unexpected error in {func_name} after {elapsed:.2f}s: {exc}"
    )
    return HTTPException(status_code=500, detail=f"{error_message}: {exc}", headers=headers)


def _log_completion(request_id: str, func_name: str, elapsed: float) -> None:
    """Log completion, with a warning if the response time exceeds the threshold."""
    from src.core.config import settings
    threshold_ms = settings.RESPONSE_TIME_WARNING_THRESHOLD_MS
    elapsed_ms = elapsed * 1000
    if elapsed_ms > threshold_ms:
        logger.warning(
            f"[{request_id}] SLOW RESPONSE: {func_name} took {elapsed:.2f}s "
            f"({elapsed_ms:.0f}ms > {threshold_ms}ms threshold)"
        )
    else:
        logger.info(f"[{request_id}] Completed {func_name} in {elapsed:.3f}s")


def handle_verification_errors(
    error_message: str = "Operation failed"
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator to handle errors in verification routes.

    Converts service errors to appropriate HTTP exceptions and logs them.
    Works with both sync and async functions.

    Args:
        error_message: Custom error message prefix

    Returns:
        Decorated function with error handling

    Example:
        @handle_verification_errors("Failed to verify text")
        async def verify(request: VerificationRequest) -> VerificationResponse:
            ...
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            """Async wrapper for error handling with request tracking and timing."""
            if not request_id_var.get():
                request_id_var.set(str(uuid.uuid4()))

            request_id = request_id_var.get()
            start_time = time.time()

            try:
                logger.info(f"[{request_id}] Starting {func.__name__}")
                result = await func(*args, **kwargs)
                _log_completion(request_id, func.__name__, time.time() - start_time)
                return result
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(
                    e, error_message, func.__name__, request_id, time.time() - start_time
                ) from e

        @wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            """Sync wrapper for error handling with request tracking and timing."""
            if not request_id_var.get():
                request_id_var.set(str(uuid.uuid4()))

            request_id = request_id_var.get()
            start_time = time.time()

            try:
                logger.info(f"[{request_id}] Starting {func.__name__}")
                result = func(*args, **kwargs)
                _log_completion(request_id, func.__name__, time.time() - start_time)
                return result
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(
                    e, error_message, func.__name__, request_id, time.time() - start_time
                ) from e

        # Return appropriate wrapper based on function type
        if asyncio.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        return sync_wrapper  # type: ignore

    return decorator


# ============================================================================
# FastAPI Exception Handlers
# ============================================================================

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return HTTP errors as JSON, always echoing the request ID."""
    request_id = request_id_var.get()
    headers = dict(exc.headers or {})
    if request_id:
        headers.setdefault("X-Request-ID", request_id)

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "request_id": request_id or None},
        headers=headers
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return request schema violations as 422 with the offending fields."""
    request_id = request_id_var.get()
    logger.warning(f"[{request_id}] Request validation failed: {len(exc.errors())} error(s)")

    errors = [
        {
            "loc": list(error.get("loc", [])),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"detail": errors, "request_id": request_id or None},
        headers={"X-Request-ID": request_id} if request_id else None
    )
