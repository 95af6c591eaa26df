from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.db.session import get_db
from app.models.game import Game
from app.models.tag import Tag

router = APIRouter(tags=["system"])


@router.get("/health")
def health():
    settings = get_settings()
    return {"status": "ok", "version": settings.app_version}


@router.get("/system/info")
def system_info(db: Session = Depends(get_db)):
    settings = get_settings()
    games_count = db.scalar(select(func.count()).select_from(Game)) or 0
    tags_count = db.scalar(select(func.count()).select_from(Tag)) or 0
    return {
        "app_name": settings.app_name,
        "app_env": settings.app_env,
        "app_version": settings.app_version,
        "admin_codes_configured": len(settings.admin_codes),
        "games": games_count,
        "tags": tags_count,
    }
