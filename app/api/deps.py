import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.errors import InvalidToken
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User
from app.services.admin_gate import AdminInfo, resolve_admin

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> str | None:
    """Caller identity, or None for requests without a bearer token."""
    if credentials is None:
        return None

    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as exc:
        raise InvalidToken("Invalid token") from exc

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidToken("Invalid token payload")

    if db.get(User, user_id) is None:
        raise InvalidToken("User not found")
    return user_id


def get_admin_codes() -> dict[str, str]:
    return get_settings().admin_codes


def get_current_admin(
    user_id: str | None = Depends(get_current_user_id),
    admin_codes: dict[str, str] = Depends(get_admin_codes),
    db: Session = Depends(get_db),
) -> AdminInfo | None:
    return resolve_admin(db, user_id, admin_codes)
