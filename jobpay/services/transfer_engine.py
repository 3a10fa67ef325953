"""
Transfer engine - Atomic two-party balance mutation under row locks
"""

import logging
from decimal import Decimal
from typing import Callable, Dict, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from jobpay.models import Profile
from jobpay.services.exceptions import (
    InsufficientFunds,
    InvalidAmount,
    InvalidTransfer,
    UnknownAccount,
)

logger = logging.getLogger(__name__)

# Scale of Profile.balance and Job.price, NUMERIC(12, 2)
CENT = Decimal("0.01")

# (locked payer, amount) -> may the transfer proceed
Precondition = Callable[[Profile, Decimal], bool]


def has_sufficient_funds(payer: Profile, amount: Decimal) -> bool:
    """Default precondition: the payer can cover the full amount."""
    return payer.balance >= amount


def validate_amount(amount: Decimal) -> None:
    """
    Amounts must be positive and fit the 2-decimal balance column.

    A sub-cent amount would be rounded on storage, so the committed balance
    change would differ from the requested one.
    """
    if amount is None or amount <= 0:
        raise InvalidAmount()
    if amount != amount.quantize(CENT):
        raise InvalidAmount("Amount must have at most 2 decimal places")


def lock_profile(db: Session, profile_id: int) -> Profile:
    """
    Lock a single profile row (SELECT ... FOR UPDATE) and return it.

    The lock is held until the caller's transaction commits or rolls back.
    populate_existing makes sure the returned balance is the committed value
    read under the lock, not a stale copy from the identity map.

    Raises:
        UnknownAccount: profile does not exist
    """
    profile = db.execute(
        select(Profile)
        .where(Profile.id == profile_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()

    if not profile:
        raise UnknownAccount(f"Profile {profile_id} not found")

    return profile


def lock_profiles(db: Session, *profile_ids: int) -> Dict[int, Profile]:
    """
    Lock several profile rows in ascending id order.

    A fixed lock order means two transfers between the same pair of
    profiles (in either direction) can never deadlock.

    Raises:
        UnknownAccount: any of the ids does not exist
    """
    wanted = sorted(set(profile_ids))
    rows = db.execute(
        select(Profile)
        .where(Profile.id.in_(wanted))
        .order_by(Profile.id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalars().all()

    profiles = {profile.id: profile for profile in rows}
    missing = [profile_id for profile_id in wanted if profile_id not in profiles]
    if missing:
        raise UnknownAccount(f"Profile {missing[0]} not found")

    return profiles


def credit(
    db: Session,
    profile_id: int,
    amount: Decimal,
    *,
    locked: Optional[Profile] = None,
) -> Profile:
    """
    Add `amount` to a profile balance.

    Pass `locked` when the caller already holds the row from lock_profile(),
    otherwise the row is locked here.

    NO COMMIT - caller must commit.
    """
    validate_amount(amount)

    profile = locked if locked is not None else lock_profile(db, profile_id)
    profile.balance = profile.balance + amount
    db.flush()

    return profile


def transfer(
    *,
    db: Session,
    payer_id: int,
    payee_id: int,
    amount: Decimal,
    precondition: Precondition = has_sufficient_funds,
) -> tuple[Profile, Profile]:
    """
    Move `amount` from payer to payee as one unit.

    Steps:
    1. Lock both profile rows (ascending id order)
    2. Evaluate the precondition against the locked payer row
    3. Debit payer, credit payee, flush

    NO COMMIT - caller must commit. On any exception the caller rolls back,
    which undoes both balance changes together.

    Returns:
        (payer, payee) with their updated balances

    Raises:
        InvalidAmount: amount <= 0 or finer than a cent
        InvalidTransfer: payer and payee are the same profile
        UnknownAccount: payer or payee does not exist
        InsufficientFunds: precondition failed on the locked payer row
    """
    validate_amount(amount)
    if payer_id == payee_id:
        raise InvalidTransfer()

    profiles = lock_profiles(db, payer_id, payee_id)
    payer = profiles[payer_id]
    payee = profiles[payee_id]

    if not precondition(payer, amount):
        logger.info(
            "Transfer rejected: insufficient funds",
            extra={"payer_id": payer_id, "payee_id": payee_id, "amount": str(amount)},
        )
        raise InsufficientFunds(
            f"Insufficient funds: balance {payer.balance} < {amount}"
        )

    payer.balance = payer.balance - amount
    payee.balance = payee.balance + amount
    db.flush()

    return payer, payee
