"""
Deposit tests - cap enforcement and who may deposit
"""

import pytest
from decimal import Decimal
from sqlalchemy.orm import Session

from jobpay.models import Profile
from jobpay.services.deposits import deposit
from jobpay.services.exceptions import (
    DepositExceedsCap,
    Forbidden,
    InvalidAmount,
    NoUnpaidJobs,
)


@pytest.fixture
def client_owing_150(make_job, active_contract, client_profile: Profile) -> Profile:
    """Client with two unpaid jobs priced 100 and 50 (cap 37.5)"""
    make_job(active_contract, Decimal("100.00"))
    make_job(active_contract, Decimal("50.00"))
    return client_profile


def _balance(db_session: Session, profile: Profile) -> Decimal:
    db_session.expire_all()
    return db_session.get(Profile, profile.id).balance


def test_deposit_above_cap_is_rejected(db_session: Session, client_owing_150: Profile):
    with pytest.raises(DepositExceedsCap) as exc_info:
        deposit(
            db=db_session,
            target_profile_id=client_owing_150.id,
            acting_profile=client_owing_150,
            amount=Decimal("40.00"),
        )

    assert "37.50" in exc_info.value.message
    assert _balance(db_session, client_owing_150) == Decimal("100.00")


def test_deposit_exactly_at_cap_succeeds(db_session: Session, client_owing_150: Profile):
    profile = deposit(
        db=db_session,
        target_profile_id=client_owing_150.id,
        acting_profile=client_owing_150,
        amount=Decimal("37.50"),
    )

    assert profile.balance == Decimal("137.50")
    assert _balance(db_session, client_owing_150) == Decimal("137.50")


def test_deposit_just_above_cap_is_rejected(db_session: Session, client_owing_150: Profile):
    with pytest.raises(DepositExceedsCap):
        deposit(
            db=db_session,
            target_profile_id=client_owing_150.id,
            acting_profile=client_owing_150,
            amount=Decimal("37.51"),
        )


def test_deposit_without_unpaid_jobs_is_rejected(db_session: Session, client_profile: Profile):
    with pytest.raises(NoUnpaidJobs):
        deposit(
            db=db_session,
            target_profile_id=client_profile.id,
            acting_profile=client_profile,
            amount=Decimal("1.00"),
        )

    assert _balance(db_session, client_profile) == Decimal("100.00")


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1.00")])
def test_deposit_non_positive_amount_is_rejected(
    db_session: Session,
    client_owing_150: Profile,
    amount: Decimal,
):
    with pytest.raises(InvalidAmount):
        deposit(
            db=db_session,
            target_profile_id=client_owing_150.id,
            acting_profile=client_owing_150,
            amount=amount,
        )


def test_deposit_into_other_profile_is_forbidden(
    db_session: Session,
    make_profile,
    client_owing_150: Profile,
):
    other = make_profile(first_name="Mr", last_name="Robot", balance=Decimal("5.00"))

    with pytest.raises(Forbidden, match="does not match the authenticated profile"):
        deposit(
            db=db_session,
            target_profile_id=client_owing_150.id,
            acting_profile=other,
            amount=Decimal("1.00"),
        )

    assert _balance(db_session, client_owing_150) == Decimal("100.00")


def test_contractor_cannot_deposit(db_session: Session, contractor_profile: Profile, unpaid_job):
    with pytest.raises(Forbidden):
        deposit(
            db=db_session,
            target_profile_id=contractor_profile.id,
            acting_profile=contractor_profile,
            amount=Decimal("1.00"),
        )


def test_cap_follows_remaining_unpaid_jobs(
    db_session: Session,
    client_owing_150: Profile,
):
    """Paying a job shrinks the cap for later deposits"""
    from jobpay.models import Job
    from jobpay.services.payments import pay_job

    job_100 = db_session.query(Job).filter(Job.price == Decimal("100.00")).one()
    pay_job(db=db_session, job_id=job_100.id, acting_profile_id=client_owing_150.id)

    with pytest.raises(DepositExceedsCap):
        deposit(
            db=db_session,
            target_profile_id=client_owing_150.id,
            acting_profile=client_owing_150,
            amount=Decimal("12.51"),
        )

    profile = deposit(
        db=db_session,
        target_profile_id=client_owing_150.id,
        acting_profile=client_owing_150,
        amount=Decimal("12.50"),
    )
    assert profile.balance == Decimal("12.50")


@pytest.mark.parametrize("amount", [Decimal("0.004"), Decimal("0.005"), Decimal("10.001")])
def test_deposit_sub_cent_amount_is_rejected(
    db_session: Session,
    client_owing_150: Profile,
    amount: Decimal,
):
    """A credit the balance column cannot hold must not be reported as applied"""
    with pytest.raises(InvalidAmount):
        deposit(
            db=db_session,
            target_profile_id=client_owing_150.id,
            acting_profile=client_owing_150,
            amount=amount,
        )

    assert _balance(db_session, client_owing_150) == Decimal("100.00")


def test_deposit_smallest_unit_is_applied_exactly(db_session: Session, client_owing_150: Profile):
    before = _balance(db_session, client_owing_150)

    deposit(
        db=db_session,
        target_profile_id=client_owing_150.id,
        acting_profile=client_owing_150,
        amount=Decimal("0.01"),
    )

    assert _balance(db_session, client_owing_150) - before == Decimal("0.01")
