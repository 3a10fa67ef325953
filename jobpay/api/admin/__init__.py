"""
Admin routes - Reporting
"""

from fastapi import APIRouter
from jobpay.infrastructure.settings import get_settings
from jobpay.api.admin.reports import router as reports_router

settings = get_settings()
router = APIRouter(prefix=f"{settings.API_PREFIX}/admin", tags=["admin"])

router.include_router(reports_router)
