from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_admin_codes, get_current_admin, get_current_user_id
from app.core.security import create_access_token
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import (
    AdminCodeRequest,
    AdminNameResponse,
    AdminStatusResponse,
    AdminVerifyResponse,
    AnonymousSignInRequest,
    TokenResponse,
)
from app.services.admin_gate import AdminInfo, verify_and_assign_code

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/anonymous", response_model=TokenResponse)
def sign_in_anonymous(payload: AnonymousSignInRequest | None = None, db: Session = Depends(get_db)):
    user = User(name=payload.name if payload else None, is_anonymous=True)
    db.add(user)
    db.commit()
    db.refresh(user)
    return TokenResponse(access_token=create_access_token(subject=user.id), user_id=user.id)


@router.post("/admin/verify", response_model=AdminVerifyResponse)
def verify_admin_code(
    payload: AdminCodeRequest,
    user_id: str | None = Depends(get_current_user_id),
    admin_codes: dict[str, str] = Depends(get_admin_codes),
    db: Session = Depends(get_db),
):
    name = verify_and_assign_code(db, user_id, payload.code, admin_codes)
    return AdminVerifyResponse(success=True, name=name)


@router.get("/admin/status", response_model=AdminStatusResponse)
def admin_status(admin: AdminInfo | None = Depends(get_current_admin)):
    return AdminStatusResponse(is_admin=admin is not None)


@router.get("/admin/name", response_model=AdminNameResponse)
def admin_name(admin: AdminInfo | None = Depends(get_current_admin)):
    return AdminNameResponse(name=admin.name if admin else None)
