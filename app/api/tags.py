from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_admin
from app.db.session import get_db
from app.schemas.common import IdResponse
from app.schemas.tags import TagGroupOut, TagOut, TagWrite
from app.services import catalog
from app.services.admin_gate import AdminInfo

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=list[TagOut])
def list_tags(db: Session = Depends(get_db)):
    return catalog.list_tags(db)


@router.get("/grouped", response_model=list[TagGroupOut])
def list_tags_grouped(db: Session = Depends(get_db)):
    grouped = catalog.group_tags(catalog.list_tags(db))
    return [{"group": group, "tags": tags} for group, tags in grouped.items()]


@router.post("", response_model=IdResponse)
def add_tag(
    payload: TagWrite,
    db: Session = Depends(get_db),
    admin: AdminInfo | None = Depends(get_current_admin),
):
    tag = catalog.add_tag(db, admin, payload)
    return IdResponse(id=tag.id)


@router.put("/{tag_id}", response_model=IdResponse)
def update_tag(
    tag_id: str,
    payload: TagWrite,
    db: Session = Depends(get_db),
    admin: AdminInfo | None = Depends(get_current_admin),
):
    tag = catalog.update_tag(db, admin, tag_id, payload)
    return IdResponse(id=tag.id)


@router.delete("/{tag_id}", response_model=IdResponse)
def remove_tag(
    tag_id: str,
    db: Session = Depends(get_db),
    admin: AdminInfo | None = Depends(get_current_admin),
):
    return IdResponse(id=catalog.remove_tag(db, admin, tag_id))
