"""
Payments service - Pay for a job exactly once
"""

import logging
from datetime import datetime, timezone
from sqlalchemy import select
from sqlalchemy.orm import Session

from jobpay.models import Contract, Job
from jobpay.services.exceptions import AlreadyPaid, JobNotFound, LedgerError
from jobpay.services.transfer_engine import has_sufficient_funds, transfer
from jobpay.utils.metrics import record_job_payment

logger = logging.getLogger(__name__)


def _find_owned_job(db: Session, job_id: int, client_id: int) -> tuple[Job, Contract] | None:
    """Job with its contract, only if the contract's client is `client_id`."""
    row = db.execute(
        select(Job, Contract)
        .join(Contract, Job.contract_id == Contract.id)
        .where(Job.id == job_id)
        .where(Contract.client_id == client_id)
    ).first()
    return (row[0], row[1]) if row else None


def _lock_job(db: Session, job_id: int) -> Job:
    return db.execute(
        select(Job)
        .where(Job.id == job_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one()


def pay_job(
    *,
    db: Session,
    job_id: int,
    acting_profile_id: int,
) -> Job:
    """
    Pay the contractor for a job on behalf of the job's client.

    Rules:
    1. Job must exist and belong to a contract whose client is the caller
       (otherwise JobNotFound, existence is not leaked)
    2. Cheap pre-check: job not already paid (no lock taken)
    3. Lock the job row, re-check paid under the lock
    4. Transfer price from client to contractor (payer row locked,
       balance >= price checked against the locked row)
    5. Set paid=True and payment_date in the same transaction, then commit

    Debit, credit and the paid flag commit or roll back together.

    Returns:
        The paid Job

    Raises:
        JobNotFound: job missing or not owned by the caller
        AlreadyPaid: job was paid before or concurrently
        InsufficientFunds: client balance does not cover the price
        UnknownAccount: contractor profile missing
    """
    try:
        found = _find_owned_job(db, job_id, acting_profile_id)
        if not found:
            raise JobNotFound()

        job, contract = found
        if job.paid:
            raise AlreadyPaid()

        contractor_id = contract.contractor_id

        # Serializes concurrent payments of the same job
        job = _lock_job(db, job_id)
        if job.paid:
            raise AlreadyPaid()

        price = job.price
        transfer(
            db=db,
            payer_id=acting_profile_id,
            payee_id=contractor_id,
            amount=price,
            precondition=has_sufficient_funds,
        )

        job.paid = True
        job.payment_date = datetime.now(timezone.utc)
        db.flush()

        db.commit()
    except LedgerError as e:
        db.rollback()
        record_job_payment(e.code)
        logger.info(
            "Job payment rejected",
            extra={"job_id": job_id, "profile_id": acting_profile_id, "code": e.code},
        )
        raise
    except Exception:
        db.rollback()
        record_job_payment("error")
        raise

    record_job_payment("paid")
    logger.info(
        "Job paid",
        extra={
            "job_id": job_id,
            "client_id": acting_profile_id,
            "contractor_id": contractor_id,
            "amount": str(price),
        },
    )
    return job
