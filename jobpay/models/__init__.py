"""
Models registry - Import all models here to ensure Base.metadata is complete

Used by Alembic, the seed script and the test suite.
Import order follows foreign key dependencies.
"""

from jobpay.infrastructure.database import Base

# 1. Profile (no foreign keys)
from jobpay.core.profiles.models import Profile, ProfileType

# 2. Contract (depends on Profile)
from jobpay.core.contracts.models import Contract, ContractStatus

# 3. Job (depends on Contract)
from jobpay.core.jobs.models import Job

__all__ = [
    "Base",
    "Profile",
    "ProfileType",
    "Contract",
    "ContractStatus",
    "Job",
]
