"""
Reporting service - Earnings aggregates over paid jobs (no locking)
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from jobpay.models import Contract, Job, Profile
from jobpay.services.exceptions import InvalidDateRange


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _paid_between(start: datetime, end: datetime):
    if start > end:
        raise InvalidDateRange()
    return (
        Job.paid.is_(True),
        Job.payment_date.between(start, end),
    )


def best_profession(db: Session, start: datetime, end: datetime) -> Optional[Dict[str, Any]]:
    """
    Profession that earned the most from jobs paid within [start, end].

    Returns:
        {"profession": str, "total_earnings": Decimal} or None if nothing was paid
    """
    start, end = _as_utc(start), _as_utc(end)
    total = func.sum(Job.price).label("total_earnings")

    row = db.execute(
        select(Profile.profession, total)
        .select_from(Job)
        .join(Contract, Job.contract_id == Contract.id)
        .join(Profile, Contract.contractor_id == Profile.id)
        .where(*_paid_between(start, end))
        .group_by(Profile.profession)
        .order_by(total.desc(), Profile.profession)
        .limit(1)
    ).first()

    if not row:
        return None

    return {
        "profession": row.profession,
        "total_earnings": Decimal(str(row.total_earnings)),
    }


def best_clients(
    db: Session,
    start: datetime,
    end: datetime,
    limit: int = 2,
) -> List[Dict[str, Any]]:
    """
    Clients that paid the most for jobs paid within [start, end].

    Returns:
        [{"id": int, "full_name": str, "paid": Decimal}, ...] highest first
    """
    start, end = _as_utc(start), _as_utc(end)
    total = func.sum(Job.price).label("total_paid")

    rows = db.execute(
        select(Profile.id, Profile.first_name, Profile.last_name, total)
        .select_from(Job)
        .join(Contract, Job.contract_id == Contract.id)
        .join(Profile, Contract.client_id == Profile.id)
        .where(*_paid_between(start, end))
        .group_by(Profile.id, Profile.first_name, Profile.last_name)
        .order_by(total.desc(), Profile.id)
        .limit(limit)
    ).all()

    return [
        {
            "id": row.id,
            "full_name": f"{row.first_name} {row.last_name}",
            "paid": Decimal(str(row.total_paid)),
        }
        for row in rows
    ]
