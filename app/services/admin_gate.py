"""Resolution of callers to admin identities.

Admin status is a capability list: a user is an admin while the code stored on
their record is a key of the configured code table. Codes are compared by exact
string membership and are never hashed or expired.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.errors import InvalidCode, Unauthenticated
from app.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminInfo:
    user_id: str
    code: str
    name: str


def resolve_admin(db: Session, user_id: str | None, admin_codes: Mapping[str, str]) -> AdminInfo | None:
    if not user_id:
        return None

    user = db.get(User, user_id)
    if user is None or not user.admin_code:
        return None

    name = admin_codes.get(user.admin_code)
    if name is None:
        return None
    return AdminInfo(user_id=user.id, code=user.admin_code, name=name)


def verify_and_assign_code(db: Session, user_id: str | None, code: str, admin_codes: Mapping[str, str]) -> str:
    """Store ``code`` on the caller's record and return the admin name it maps to.

    Overwrites any previously stored code. An unknown code leaves the record untouched.
    """
    if not user_id:
        raise Unauthenticated("Sign in before verifying an admin code")

    user = db.get(User, user_id)
    if user is None:
        raise Unauthenticated("Sign in before verifying an admin code")

    name = admin_codes.get(code)
    if name is None:
        logger.warning("Rejected admin code attempt for user %s", user_id)
        raise InvalidCode("Invalid admin code")

    user.admin_code = code
    db.add(user)
    db.commit()
    logger.info("User %s verified as admin %s", user_id, name)
    return name
