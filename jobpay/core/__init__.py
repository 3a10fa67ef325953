"""
Core domain models - Export all models for Alembic
"""

from jobpay.core.profiles.models import Profile
from jobpay.core.contracts.models import Contract
from jobpay.core.jobs.models import Job

__all__ = ["Profile", "Contract", "Job"]
