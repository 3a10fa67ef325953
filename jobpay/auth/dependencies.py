"""
Authentication dependencies for FastAPI

Callers identify themselves with a `profile_id` header. The header is
resolved to a Profile; anything that does not resolve is rejected with 401
before any payment or deposit logic runs.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, Request, status, Header
from sqlalchemy import select
from sqlalchemy.orm import Session

from jobpay.infrastructure.database import get_db
from jobpay.models import Profile

logger = logging.getLogger(__name__)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={
            "error": {
                "code": "UNAUTHORIZED",
                "message": message,
            }
        },
    )


def get_current_profile(
    request: Request,
    profile_id: Optional[str] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
) -> Profile:
    """
    Resolve the `profile_id` header to the acting Profile.

    Raises 401 if the header is missing, not an integer, or unknown.
    """
    if not profile_id or not profile_id.strip():
        raise _unauthorized("profile_id header missing")

    try:
        parsed_id = int(profile_id.strip())
    except ValueError:
        raise _unauthorized("Unauthorized to make this request")

    profile = db.execute(
        select(Profile).where(Profile.id == parsed_id)
    ).scalar_one_or_none()

    if not profile:
        logger.info("Unknown profile in request", extra={"profile_id": parsed_id})
        raise _unauthorized("Unauthorized to make this request")

    # Picked up by RequestLoggingMiddleware
    request.state.actor_id = profile.id
    request.state.actor_role = profile.type.value

    return profile
