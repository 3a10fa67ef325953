"""
Pytest configuration and fixtures
"""

import pytest
import os
import tempfile
from decimal import Decimal
from typing import Callable, Optional
from datetime import datetime
from sqlalchemy.orm import Session
from fastapi.testclient import TestClient

# Set test environment variables before importing app
_db_dir = tempfile.mkdtemp(prefix="jobpay-tests-")
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["LOCK_TIMEOUT_SECONDS"] = "30"
os.environ["LOG_LEVEL"] = "DEBUG"

from jobpay.infrastructure.database import Base, SessionLocal, engine, get_db
from jobpay.main import app
from jobpay.models import Contract, ContractStatus, Job, Profile, ProfileType


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Create a fresh database session for each test.
    Tables are dropped and recreated around every test.

    The session shares the application's engine, so it goes through the same
    BEGIN IMMEDIATE locking as request sessions. Tests that start worker
    threads must end the session's transaction first (commit or rollback).
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session):
    """
    Create FastAPI test client with dependency overrides.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def make_profile(db_session: Session) -> Callable[..., Profile]:
    """Factory: create and commit a Profile"""
    def _make(
        first_name: str = "Test",
        last_name: str = "Profile",
        profession: str = "Tester",
        balance: Decimal = Decimal("0.00"),
        profile_type: ProfileType = ProfileType.CLIENT,
    ) -> Profile:
        profile = Profile(
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            balance=balance,
            type=profile_type,
        )
        db_session.add(profile)
        db_session.commit()
        db_session.refresh(profile)
        return profile

    return _make


@pytest.fixture
def make_contract(db_session: Session) -> Callable[..., Contract]:
    """Factory: create and commit a Contract between two profiles"""
    def _make(
        client: Profile,
        contractor: Profile,
        status: ContractStatus = ContractStatus.IN_PROGRESS,
        terms: str = "bla bla bla",
    ) -> Contract:
        contract = Contract(
            terms=terms,
            status=status,
            client_id=client.id,
            contractor_id=contractor.id,
        )
        db_session.add(contract)
        db_session.commit()
        db_session.refresh(contract)
        return contract

    return _make


@pytest.fixture
def make_job(db_session: Session) -> Callable[..., Job]:
    """Factory: create and commit a Job on a contract"""
    def _make(
        contract: Contract,
        price: Decimal,
        paid: Optional[bool] = None,
        payment_date: Optional[datetime] = None,
        description: str = "work",
    ) -> Job:
        job = Job(
            description=description,
            price=price,
            paid=paid,
            payment_date=payment_date,
            contract_id=contract.id,
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make


@pytest.fixture
def client_profile(make_profile) -> Profile:
    """Client with balance 100"""
    return make_profile(
        first_name="Harry",
        last_name="Potter",
        profession="Wizard",
        balance=Decimal("100.00"),
        profile_type=ProfileType.CLIENT,
    )


@pytest.fixture
def contractor_profile(make_profile) -> Profile:
    """Contractor with balance 0"""
    return make_profile(
        first_name="Linus",
        last_name="Torvalds",
        profession="Programmer",
        balance=Decimal("0.00"),
        profile_type=ProfileType.CONTRACTOR,
    )


@pytest.fixture
def active_contract(make_contract, client_profile: Profile, contractor_profile: Profile) -> Contract:
    """in_progress contract between client_profile and contractor_profile"""
    return make_contract(client_profile, contractor_profile)


@pytest.fixture
def unpaid_job(make_job, active_contract: Contract) -> Job:
    """Unpaid job priced 60 on active_contract"""
    return make_job(active_contract, Decimal("60.00"))
