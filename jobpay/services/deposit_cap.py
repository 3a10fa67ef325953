"""
Deposit cap - How much a client may deposit in a single operation
"""

from decimal import Decimal
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from jobpay.infrastructure.settings import get_settings
from jobpay.models import Contract, Job


def unpaid_job_filter():
    """Jobs are unpaid until `paid` is explicitly set to True."""
    return or_(Job.paid.is_(None), Job.paid.is_(False))


def unpaid_jobs_total(db: Session, client_id: int) -> Decimal:
    """
    Sum of prices of the client's unpaid jobs (all contract statuses).

    Returns Decimal(0) if the client owes nothing.
    """
    result = db.execute(
        select(func.coalesce(func.sum(Job.price), 0))
        .select_from(Job)
        .join(Contract, Job.contract_id == Contract.id)
        .where(Contract.client_id == client_id)
        .where(unpaid_job_filter())
    ).scalar()

    return Decimal(str(result)) if result is not None else Decimal("0")


def max_deposit(db: Session, client_id: int) -> Decimal:
    """
    Maximum single deposit for a client: DEPOSIT_CAP_RATIO x unpaid job total.

    With the default ratio of 0.25 a client owing 150 may deposit 37.50.
    Zero when the client has no unpaid jobs.
    """
    ratio = get_settings().DEPOSIT_CAP_RATIO
    total = unpaid_jobs_total(db, client_id)
    if total <= 0:
        return Decimal("0")
    return total * ratio
