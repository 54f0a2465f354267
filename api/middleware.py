"""
Consolidated middleware and exception handlers for the RecipeBox API
"""

import time
import logging
from uuid import uuid4
from decimal import Decimal

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import error_response
from app.exceptions import RecipeBoxError, UnauthorizedError

logger = logging.getLogger("recipebox.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, Decimal):
        return float(obj)
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, Exception):
        return str(obj)
    return obj


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id
        client = request.client.host if request.client else None

        logger.info(
            "Request started request_id=%s method=%s url=%s client=%s",
            request_id,
            request.method,
            request.url,
            client,
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": client,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed request_id=%s method=%s url=%s error=%s duration=%.4fs",
                request_id,
                request.method,
                request.url,
                exc,
                process_time,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "Request completed request_id=%s method=%s url=%s status=%d duration=%.4fs",
            request_id,
            request.method,
            request.url,
            response.status_code,
            process_time,
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=422,
        content=error_response(
            "VALIDATION_ERROR",
            "Request validation failed",
            make_serializable(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(f"HTTP_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def recipebox_exception_handler(request: Request, exc: RecipeBoxError):
    """Handle service errors: the raw message goes back to the client"""
    logger.warning(
        f"{exc.__class__.__name__} on {request.method} {request.url}: {exc.message}"
    )

    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(**exc.to_dict()),
        headers=headers,
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(
            "INTERNAL_SERVER_ERROR", "An unexpected error occurred"
        ),
    )
