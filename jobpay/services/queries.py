"""
Read-only contract and job queries for the acting profile
"""

from typing import List
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from jobpay.models import Contract, ContractStatus, Job
from jobpay.services.deposit_cap import unpaid_job_filter
from jobpay.services.exceptions import ContractNotFound


def _is_party(profile_id: int):
    return or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id)


def get_contract(db: Session, contract_id: int, profile_id: int) -> Contract:
    """
    Get a contract the profile is a party to.

    Raises ContractNotFound for missing contracts and for contracts that
    belong to other profiles alike.
    """
    contract = db.execute(
        select(Contract)
        .where(Contract.id == contract_id)
        .where(_is_party(profile_id))
    ).scalar_one_or_none()

    if not contract:
        raise ContractNotFound()

    return contract


def list_contracts(db: Session, profile_id: int) -> List[Contract]:
    """Non-terminated contracts where the profile is client or contractor."""
    return list(db.execute(
        select(Contract)
        .where(_is_party(profile_id))
        .where(Contract.status != ContractStatus.TERMINATED)
        .order_by(Contract.id)
    ).scalars().all())


def list_unpaid_jobs(db: Session, profile_id: int) -> List[Job]:
    """Unpaid jobs on active (in_progress) contracts of the profile."""
    return list(db.execute(
        select(Job)
        .join(Contract, Job.contract_id == Contract.id)
        .where(unpaid_job_filter())
        .where(Contract.status == ContractStatus.IN_PROGRESS)
        .where(_is_party(profile_id))
        .order_by(Job.id)
    ).scalars().all())
