"""
Job payment tests - exactly-once payment, atomicity and ownership
"""

import pytest
from decimal import Decimal
from sqlalchemy import event
from sqlalchemy.orm import Session

from jobpay.infrastructure.database import engine
from jobpay.models import Job, Profile, ProfileType
from jobpay.services.exceptions import AlreadyPaid, InsufficientFunds, JobNotFound, UnknownAccount
from jobpay.services.payments import pay_job


def _balances(db_session: Session, *profiles: Profile):
    db_session.expire_all()
    return [db_session.get(Profile, p.id).balance for p in profiles]


def test_pay_job_success(
    db_session: Session,
    client_profile: Profile,
    contractor_profile: Profile,
    unpaid_job: Job,
):
    """Client (100) pays job (60) to contractor (0)"""
    job = pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=client_profile.id)

    assert job.paid is True
    assert job.payment_date is not None
    assert _balances(db_session, client_profile, contractor_profile) == [
        Decimal("40.00"),
        Decimal("60.00"),
    ]


def test_pay_job_twice_is_rejected(
    db_session: Session,
    client_profile: Profile,
    contractor_profile: Profile,
    unpaid_job: Job,
):
    pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=client_profile.id)

    with pytest.raises(AlreadyPaid):
        pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=client_profile.id)

    assert _balances(db_session, client_profile, contractor_profile) == [
        Decimal("40.00"),
        Decimal("60.00"),
    ]


def test_pay_job_insufficient_funds_changes_nothing(
    db_session: Session,
    make_profile,
    make_contract,
    make_job,
    contractor_profile: Profile,
):
    poor_client = make_profile(first_name="Ash", last_name="Kethcum", balance=Decimal("10.00"))
    job = make_job(make_contract(poor_client, contractor_profile), Decimal("60.00"))

    with pytest.raises(InsufficientFunds):
        pay_job(db=db_session, job_id=job.id, acting_profile_id=poor_client.id)

    assert _balances(db_session, poor_client, contractor_profile) == [
        Decimal("10.00"),
        Decimal("0.00"),
    ]
    assert db_session.get(Job, job.id).paid is None


def test_pay_job_conserves_money(
    db_session: Session,
    make_profile,
    make_contract,
    make_job,
):
    client = make_profile(balance=Decimal("231.11"))
    contractor = make_profile(balance=Decimal("64.00"), profile_type=ProfileType.CONTRACTOR)
    job = make_job(make_contract(client, contractor), Decimal("121.00"))

    before = sum(_balances(db_session, client, contractor))
    pay_job(db=db_session, job_id=job.id, acting_profile_id=client.id)
    after = sum(_balances(db_session, client, contractor))

    assert before == after == Decimal("295.11")


def test_pay_job_by_contractor_is_not_found(
    db_session: Session,
    client_profile: Profile,
    contractor_profile: Profile,
    unpaid_job: Job,
):
    """Only the contract's client may pay; others cannot tell the job exists"""
    with pytest.raises(JobNotFound):
        pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=contractor_profile.id)

    assert _balances(db_session, client_profile, contractor_profile) == [
        Decimal("100.00"),
        Decimal("0.00"),
    ]


def test_pay_job_by_unrelated_client_is_not_found(
    db_session: Session,
    make_profile,
    unpaid_job: Job,
):
    stranger = make_profile(first_name="Mr", last_name="Robot", balance=Decimal("1000.00"))

    with pytest.raises(JobNotFound):
        pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=stranger.id)

    assert db_session.get(Job, unpaid_job.id).paid is None


def test_pay_missing_job_is_not_found(db_session: Session, client_profile: Profile):
    with pytest.raises(JobNotFound):
        pay_job(db=db_session, job_id=12345, acting_profile_id=client_profile.id)


def test_pay_job_marked_paid_false_can_be_paid(
    db_session: Session,
    make_job,
    active_contract,
    client_profile: Profile,
):
    job = make_job(active_contract, Decimal("30.00"), paid=False)

    paid = pay_job(db=db_session, job_id=job.id, acting_profile_id=client_profile.id)

    assert paid.paid is True
    assert _balances(db_session, client_profile) == [Decimal("70.00")]


def test_failure_after_transfer_rolls_back_everything(
    db_session: Session,
    client_profile: Profile,
    contractor_profile: Profile,
    unpaid_job: Job,
):
    """
    The paid-flag write fails after debit and credit were already flushed:
    balances and the job flag must all stay as they were.
    """
    def fail_on_paid_flag(session, flush_context, instances):
        if any(isinstance(obj, Job) and obj.paid for obj in session.dirty):
            raise RuntimeError("paid flag write failed")

    event.listen(db_session, "before_flush", fail_on_paid_flag)
    try:
        with pytest.raises(RuntimeError, match="paid flag write failed"):
            pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=client_profile.id)
    finally:
        event.remove(db_session, "before_flush", fail_on_paid_flag)

    assert _balances(db_session, client_profile, contractor_profile) == [
        Decimal("100.00"),
        Decimal("0.00"),
    ]
    job = db_session.get(Job, unpaid_job.id)
    assert job.paid is None
    assert job.payment_date is None


def test_failed_commit_rolls_back_everything(
    db_session: Session,
    monkeypatch: pytest.MonkeyPatch,
    client_profile: Profile,
    contractor_profile: Profile,
    unpaid_job: Job,
):
    def failing_commit():
        raise RuntimeError("commit failed")

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(RuntimeError, match="commit failed"):
        pay_job(db=db_session, job_id=unpaid_job.id, acting_profile_id=client_profile.id)

    monkeypatch.undo()

    assert _balances(db_session, client_profile, contractor_profile) == [
        Decimal("100.00"),
        Decimal("0.00"),
    ]
    assert db_session.get(Job, unpaid_job.id).paid is None


def _delete_profile_row(profile_id: int) -> None:
    """Delete a profile with foreign keys off, leaving its contracts dangling"""
    raw = engine.raw_connection()
    try:
        cursor = raw.cursor()
        cursor.execute("PRAGMA foreign_keys=OFF")
        cursor.execute("DELETE FROM profiles WHERE id = ?", (profile_id,))
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
    finally:
        raw.close()


def test_pay_job_with_missing_contractor_rolls_back(
    db_session: Session,
    client_profile: Profile,
    contractor_profile: Profile,
    unpaid_job: Job,
):
    client_id, contractor_id, job_id = client_profile.id, contractor_profile.id, unpaid_job.id
    # Release the session's write lock so the row can be removed
    db_session.rollback()
    _delete_profile_row(contractor_id)
    db_session.expunge_all()

    with pytest.raises(UnknownAccount):
        pay_job(db=db_session, job_id=job_id, acting_profile_id=client_id)

    db_session.expire_all()
    assert db_session.get(Profile, client_id).balance == Decimal("100.00")
    assert db_session.get(Job, job_id).paid is None
