"""
Admin reporting endpoints - READ-ONLY
"""

from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobpay.infrastructure.database import get_db
from jobpay.infrastructure.settings import get_settings
from jobpay.schemas.reports import BestClientResponse, BestProfessionResponse
from jobpay.services.reporting import best_clients, best_profession

router = APIRouter()


@router.get(
    "/best-profession",
    response_model=BestProfessionResponse,
    summary="Best profession",
    description="Profession that earned the most for jobs paid in [start, end].",
)
def read_best_profession(
    start: datetime = Query(..., description="Range start (ISO 8601 date or datetime)"),
    end: datetime = Query(..., description="Range end (ISO 8601 date or datetime)"),
    db: Session = Depends(get_db),
) -> BestProfessionResponse:
    result = best_profession(db, start, end)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "NO_PAID_JOBS_IN_RANGE",
                    "message": "No contractor found within the date range",
                }
            },
        )

    return BestProfessionResponse(
        profession=result["profession"],
        total_earnings=str(result["total_earnings"]),
    )


@router.get(
    "/best-clients",
    response_model=List[BestClientResponse],
    summary="Best clients",
    description="Clients that paid the most for jobs paid in [start, end].",
)
def read_best_clients(
    start: datetime = Query(..., description="Range start (ISO 8601 date or datetime)"),
    end: datetime = Query(..., description="Range end (ISO 8601 date or datetime)"),
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Number of clients (default 2)"),
    db: Session = Depends(get_db),
) -> List[BestClientResponse]:
    rows = best_clients(
        db,
        start,
        end,
        limit=limit or get_settings().BEST_CLIENTS_DEFAULT_LIMIT,
    )
    return [
        BestClientResponse(id=row["id"], full_name=row["full_name"], paid=str(row["paid"]))
        for row in rows
    ]
