"""
Deposits service - Client self-deposits capped by outstanding obligations
"""

import logging
from decimal import Decimal
from sqlalchemy.orm import Session

from jobpay.infrastructure.settings import get_settings
from jobpay.models import Profile, ProfileType
from jobpay.services.deposit_cap import max_deposit
from jobpay.services.exceptions import (
    DepositExceedsCap,
    Forbidden,
    LedgerError,
    NoUnpaidJobs,
)
from jobpay.services.transfer_engine import credit, lock_profile, validate_amount
from jobpay.utils.metrics import record_deposit

logger = logging.getLogger(__name__)


def deposit(
    *,
    db: Session,
    target_profile_id: int,
    acting_profile: Profile,
    amount: Decimal,
) -> Profile:
    """
    Credit a client's own balance.

    Rules:
    1. A profile may only deposit into itself (Forbidden)
    2. Only clients may deposit (Forbidden)
    3. Amount must be > 0 with at most 2 decimal places (InvalidAmount)
    4. Lock the target profile row; the cap and the credit are computed
       against that locked row, so a concurrent job payment by the same
       client cannot move the unpaid total in between
    5. cap = max_deposit(client); zero cap -> NoUnpaidJobs
    6. amount > cap -> DepositExceedsCap
    7. Credit the already locked row and commit

    Returns:
        The credited Profile
    """
    try:
        if target_profile_id != acting_profile.id:
            raise Forbidden("Profile id does not match the authenticated profile")

        if acting_profile.type != ProfileType.CLIENT:
            raise Forbidden("Only clients are allowed to deposit money")

        validate_amount(amount)

        locked = lock_profile(db, target_profile_id)

        cap = max_deposit(db, target_profile_id)
        if cap <= 0:
            raise NoUnpaidJobs()

        if amount > cap:
            ratio = get_settings().DEPOSIT_CAP_RATIO
            raise DepositExceedsCap(
                f"User cannot deposit more than {ratio:.0%} of their unpaid jobs (max {cap:.2f})"
            )

        profile = credit(db, target_profile_id, amount, locked=locked)

        db.commit()
    except LedgerError as e:
        db.rollback()
        record_deposit(e.code)
        logger.info(
            "Deposit rejected",
            extra={"profile_id": target_profile_id, "amount": str(amount), "code": e.code},
        )
        raise
    except Exception:
        db.rollback()
        record_deposit("error")
        raise

    record_deposit("deposited")
    logger.info(
        "Deposit applied",
        extra={"profile_id": target_profile_id, "amount": str(amount)},
    )
    return profile
