"""
FastAPI application entry point
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobpay.infrastructure.settings import get_settings
from jobpay.infrastructure.logging_config import setup_logging
from jobpay.api.exceptions import (
    ledger_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler,
)
from jobpay.api.public.health import router as health_router
from jobpay.api.public.metrics import router as metrics_router
from jobpay.api.v1 import router as api_v1_router
from jobpay.api.admin import router as admin_router
from jobpay.services.exceptions import LedgerError
from jobpay.utils.trace_id import TraceIDMiddleware
from jobpay.utils.request_logging import RequestLoggingMiddleware

# Get settings
settings = get_settings()

# Setup logging
setup_logging(settings.LOG_LEVEL)

# Create FastAPI app
app = FastAPI(
    title="JobPay API",
    description="Contracts, job payments and client deposits",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add custom middlewares (order matters - last added is outermost)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(TraceIDMiddleware)

# Register exception handlers
app.add_exception_handler(LedgerError, ledger_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(metrics_router)
app.include_router(api_v1_router)
app.include_router(admin_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": "JobPay API",
        "version": "1.0.0",
        "status": "running",
    }
