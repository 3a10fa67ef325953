"""
API v1 routes - Profile-facing API
"""

from fastapi import APIRouter
from jobpay.infrastructure.settings import get_settings
from jobpay.api.v1.contracts import router as contracts_router
from jobpay.api.v1.payments import router as payments_router

settings = get_settings()
router = APIRouter(prefix=settings.API_PREFIX, tags=["api-v1"])

router.include_router(contracts_router)
router.include_router(payments_router)
