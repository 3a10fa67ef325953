"""
Services layer - Payment, deposit and reporting logic
"""

from jobpay.services.transfer_engine import (
    transfer,
    credit,
    lock_profile,
    validate_amount,
    has_sufficient_funds,
)
from jobpay.services.deposit_cap import max_deposit, unpaid_jobs_total
from jobpay.services.payments import pay_job
from jobpay.services.deposits import deposit
from jobpay.services.queries import get_contract, list_contracts, list_unpaid_jobs
from jobpay.services.reporting import best_profession, best_clients
from jobpay.services.exceptions import (
    LedgerError,
    JobNotFound,
    ContractNotFound,
    UnknownAccount,
    AlreadyPaid,
    InsufficientFunds,
    Forbidden,
    NoUnpaidJobs,
    DepositExceedsCap,
    InvalidAmount,
    InvalidTransfer,
    InvalidDateRange,
)

__all__ = [
    # Transfer engine
    "transfer",
    "credit",
    "lock_profile",
    "validate_amount",
    "has_sufficient_funds",
    # Deposit cap
    "max_deposit",
    "unpaid_jobs_total",
    # Orchestrators
    "pay_job",
    "deposit",
    # Queries and reports
    "get_contract",
    "list_contracts",
    "list_unpaid_jobs",
    "best_profession",
    "best_clients",
    # Exceptions
    "LedgerError",
    "JobNotFound",
    "ContractNotFound",
    "UnknownAccount",
    "AlreadyPaid",
    "InsufficientFunds",
    "Forbidden",
    "NoUnpaidJobs",
    "DepositExceedsCap",
    "InvalidAmount",
    "InvalidTransfer",
    "InvalidDateRange",
]
