"""
Contract and job read endpoints for the acting profile
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobpay.auth.dependencies import get_current_profile
from jobpay.infrastructure.database import get_db
from jobpay.models import Contract, Job, Profile
from jobpay.schemas.contracts import ContractResponse, JobResponse
from jobpay.services.queries import get_contract, list_contracts, list_unpaid_jobs

router = APIRouter()


def contract_to_response(contract: Contract) -> ContractResponse:
    return ContractResponse(
        id=contract.id,
        terms=contract.terms,
        status=contract.status.value,
        client_id=contract.client_id,
        contractor_id=contract.contractor_id,
    )


def job_to_response(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        description=job.description,
        price=str(job.price),
        paid=job.paid,
        payment_date=job.payment_date.isoformat() if job.payment_date else None,
        contract_id=job.contract_id,
    )


@router.get(
    "/contracts/{contract_id}",
    response_model=ContractResponse,
    summary="Get contract",
    description="Get a contract the authenticated profile is a party to. 404 otherwise.",
)
def read_contract(
    contract_id: int,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> ContractResponse:
    return contract_to_response(get_contract(db, contract_id, profile.id))


@router.get(
    "/contracts",
    response_model=List[ContractResponse],
    summary="List contracts",
    description="Non-terminated contracts of the authenticated profile.",
)
def read_contracts(
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> List[ContractResponse]:
    return [contract_to_response(c) for c in list_contracts(db, profile.id)]


@router.get(
    "/jobs/unpaid",
    response_model=List[JobResponse],
    summary="List unpaid jobs",
    description="Unpaid jobs on in_progress contracts of the authenticated profile.",
)
def read_unpaid_jobs(
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> List[JobResponse]:
    return [job_to_response(j) for j in list_unpaid_jobs(db, profile.id)]
