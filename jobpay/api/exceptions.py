"""
Global exception handlers
"""

import logging
from decimal import Decimal
from typing import Any, Dict
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobpay.services.exceptions import LedgerError
from jobpay.utils.trace_id import get_trace_id

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str, trace_id: str | None, **extra: Any) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message, "trace_id": trace_id}
    error.update(extra)
    return {"error": error}


async def ledger_exception_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """Map domain errors to their HTTP status and stable error code"""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, get_trace_id(request)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions"""
    trace_id = get_trace_id(request)

    # If detail is already a dict with "error" key, keep its code and message
    if isinstance(exc.detail, dict) and isinstance(exc.detail.get("error"), dict):
        error_response: Dict[str, Any] = {"error": dict(exc.detail["error"])}
        error_response["error"].setdefault("trace_id", trace_id)
    else:
        error_response = _error_body(
            f"HTTP_{exc.status_code}",
            exc.detail if isinstance(exc.detail, str) else str(exc.detail),
            trace_id,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation exceptions"""

    def convert_non_serializable(obj):
        """Recursively convert non-JSON-serializable objects to strings"""
        if isinstance(obj, (Decimal, Exception)):
            return str(obj)
        elif isinstance(obj, dict):
            return {key: convert_non_serializable(value) for key, value in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert_non_serializable(item) for item in obj]
        return obj

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            get_trace_id(request),
            details=convert_non_serializable(exc.errors()),
        ),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions"""
    trace_id = get_trace_id(request)

    # Details go to the log only
    logger.exception("Unhandled exception", exc_info=exc, extra={"trace_id": trace_id})

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", "An internal error occurred", trace_id),
    )
