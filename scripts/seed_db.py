"""
Seed script to create a demo ledger (idempotent)

Creates the tables if needed, then inserts demo profiles, contracts and jobs
unless profiles already exist.
"""

import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from sqlalchemy.orm import Session
from jobpay.infrastructure.database import Base, SessionLocal, engine
from jobpay.models import Contract, ContractStatus, Job, Profile, ProfileType

PROFILES = [
    # id, first_name, last_name, profession, balance, type
    (1, "Harry", "Potter", "Wizard", "1150", ProfileType.CLIENT),
    (2, "Mr", "Robot", "Hacker", "231.11", ProfileType.CLIENT),
    (3, "John", "Snow", "Knows nothing", "451.3", ProfileType.CLIENT),
    (4, "Ash", "Kethcum", "Pokemon master", "1.3", ProfileType.CLIENT),
    (5, "John", "Lenon", "Musician", "64", ProfileType.CONTRACTOR),
    (6, "Linus", "Torvalds", "Programmer", "1214", ProfileType.CONTRACTOR),
    (7, "Alan", "Turing", "Programmer", "22", ProfileType.CONTRACTOR),
    (8, "Aragorn", "II Elessar Telcontarion", "Fighter", "314", ProfileType.CONTRACTOR),
]

CONTRACTS = [
    # id, status, client_id, contractor_id
    (1, ContractStatus.TERMINATED, 1, 5),
    (2, ContractStatus.IN_PROGRESS, 1, 6),
    (3, ContractStatus.IN_PROGRESS, 2, 6),
    (4, ContractStatus.IN_PROGRESS, 2, 7),
    (5, ContractStatus.NEW, 3, 8),
    (6, ContractStatus.IN_PROGRESS, 3, 7),
    (7, ContractStatus.IN_PROGRESS, 4, 7),
    (8, ContractStatus.IN_PROGRESS, 4, 6),
    (9, ContractStatus.IN_PROGRESS, 4, 8),
]

JOBS = [
    # contract_id, price, payment_date (None = unpaid)
    (1, "200", None),
    (2, "201", None),
    (3, "202", None),
    (4, "200", None),
    (7, "200", None),
    (7, "2020", datetime(2020, 8, 15, 19, 11, 26)),
    (2, "200", datetime(2020, 8, 15, 19, 11, 26)),
    (3, "200", datetime(2020, 8, 16, 19, 11, 26)),
    (1, "200", datetime(2020, 8, 17, 19, 11, 26)),
    (5, "200", datetime(2020, 8, 17, 19, 11, 26)),
    (3, "21", datetime(2020, 8, 10, 19, 11, 26)),
    (4, "21", datetime(2020, 8, 15, 19, 11, 26)),
    (4, "121", datetime(2020, 8, 15, 19, 11, 26)),
    (3, "121", datetime(2020, 8, 14, 23, 11, 26)),
]


def seed_ledger(db: Session):
    """Create demo profiles, contracts and jobs if no profiles exist"""
    print("Seeding ledger...")

    if db.query(Profile).first():
        print("  ✓ Profiles already exist, nothing to do")
        return

    for profile_id, first_name, last_name, profession, balance, profile_type in PROFILES:
        db.add(Profile(
            id=profile_id,
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            balance=Decimal(balance),
            type=profile_type,
        ))
    db.flush()
    print(f"  ✓ Created {len(PROFILES)} profiles")

    for contract_id, status, client_id, contractor_id in CONTRACTS:
        db.add(Contract(
            id=contract_id,
            terms="bla bla bla",
            status=status,
            client_id=client_id,
            contractor_id=contractor_id,
        ))
    db.flush()
    print(f"  ✓ Created {len(CONTRACTS)} contracts")

    for contract_id, price, payment_date in JOBS:
        db.add(Job(
            description="work",
            price=Decimal(price),
            paid=True if payment_date else None,
            payment_date=payment_date.replace(tzinfo=timezone.utc) if payment_date else None,
            contract_id=contract_id,
        ))
    db.flush()
    print(f"  ✓ Created {len(JOBS)} jobs")

    db.commit()
    print("Ledger seeding complete.")


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_ledger(db)
    finally:
        db.close()
