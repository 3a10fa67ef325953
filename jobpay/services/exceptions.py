"""
Ledger exceptions - One class per caller-visible failure

Each error carries a stable `code` and the HTTP status it maps to. Messages
never include lock or row-version details.
"""


class LedgerError(Exception):
    """Base exception for payment and deposit operations"""

    code = "LEDGER_ERROR"
    status_code = 400
    default_message = "Ledger operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# NotFound

class JobNotFound(LedgerError):
    """Job does not exist or is not owned by the caller"""
    code = "JOB_NOT_FOUND"
    status_code = 404
    default_message = "No job found"


class ContractNotFound(LedgerError):
    """Contract does not exist or the caller is not a party to it"""
    code = "CONTRACT_NOT_FOUND"
    status_code = 404
    default_message = "Contract not found"


class UnknownAccount(LedgerError):
    """A transfer references a profile id that does not exist"""
    code = "UNKNOWN_ACCOUNT"
    status_code = 404
    default_message = "Account not found"


# Conflict

class AlreadyPaid(LedgerError):
    """Job has already been paid for"""
    code = "JOB_ALREADY_PAID"
    status_code = 409
    default_message = "Job has already been paid for"


class InsufficientFunds(LedgerError):
    """Payer balance does not cover the amount"""
    code = "INSUFFICIENT_FUNDS"
    status_code = 402
    default_message = "Insufficient funds"


# Deposit rules

class Forbidden(LedgerError):
    """Caller may not act on the target profile"""
    code = "FORBIDDEN"
    status_code = 403
    default_message = "Operation not allowed for this profile"


class NoUnpaidJobs(LedgerError):
    """Client owes nothing, so no deposit is allowed"""
    code = "NO_UNPAID_JOBS"
    status_code = 422
    default_message = "User has no unpaid jobs"


class DepositExceedsCap(LedgerError):
    """Deposit is larger than the allowed share of unpaid job totals"""
    code = "DEPOSIT_EXCEEDS_CAP"
    status_code = 422
    default_message = "Deposit exceeds the allowed maximum"


# Validation

class InvalidAmount(LedgerError):
    """Amount must be strictly positive"""
    code = "INVALID_AMOUNT"
    status_code = 400
    default_message = "Amount must be greater than 0"


class InvalidTransfer(LedgerError):
    """Payer and payee must be different profiles"""
    code = "INVALID_TRANSFER"
    status_code = 400
    default_message = "Payer and payee must be different profiles"


class InvalidDateRange(LedgerError):
    """Report start date is after its end date"""
    code = "INVALID_DATE_RANGE"
    status_code = 400
    default_message = "Start date must not be after end date"
