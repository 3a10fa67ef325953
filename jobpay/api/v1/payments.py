"""
Job payment and deposit endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobpay.auth.dependencies import get_current_profile
from jobpay.infrastructure.database import get_db
from jobpay.models import Profile
from jobpay.schemas.balances import DepositRequest, DepositResponse, JobPaymentResponse
from jobpay.services.deposits import deposit
from jobpay.services.payments import pay_job

router = APIRouter()


@router.post(
    "/jobs/{job_id}/pay",
    response_model=JobPaymentResponse,
    summary="Pay for a job",
    description=(
        "Pay the contractor for one of the caller's jobs. "
        "404 if the job is not the caller's, 409 if already paid, 402 if the balance is too low."
    ),
)
def pay_for_job(
    job_id: int,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> JobPaymentResponse:
    job = pay_job(db=db, job_id=job_id, acting_profile_id=profile.id)

    return JobPaymentResponse(
        message="Job paid for successfully",
        job_id=job.id,
        amount=str(job.price),
        balance=str(profile.balance),
    )


@router.post(
    "/balances/deposit/{user_id}",
    response_model=DepositResponse,
    summary="Deposit into own balance",
    description=(
        "Clients may deposit into their own balance, at most 25% of the total "
        "of their unpaid jobs per deposit."
    ),
)
def deposit_to_balance(
    user_id: int,
    request: DepositRequest,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> DepositResponse:
    credited = deposit(
        db=db,
        target_profile_id=user_id,
        acting_profile=profile,
        amount=request.amount,
    )

    return DepositResponse(
        message="Deposit successful",
        profile_id=credited.id,
        balance=str(credited.balance),
    )
