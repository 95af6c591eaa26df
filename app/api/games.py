from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_current_admin
from app.core.errors import NotFound
from app.db.session import get_db
from app.schemas.common import IdResponse
from app.schemas.games import GameOut, GameWrite
from app.schemas.tags import TagOut
from app.services import catalog
from app.services.admin_gate import AdminInfo

router = APIRouter(prefix="/games", tags=["games"])


@router.get("", response_model=list[GameOut])
def list_games(
    category: list[str] | None = Query(default=None),
    q: str | None = Query(default=None, max_length=255),
    db: Session = Depends(get_db),
):
    return catalog.list_games(db, categories=category, search_query=q)


@router.get("/categories", response_model=list[str])
def list_categories(db: Session = Depends(get_db)):
    return catalog.list_tag_names(db)


@router.get("/categories/details", response_model=list[TagOut])
def list_categories_with_details(db: Session = Depends(get_db)):
    return catalog.list_tags(db)


@router.get("/{game_id}", response_model=GameOut)
def game_details(game_id: str, db: Session = Depends(get_db)):
    game = catalog.get_game(db, game_id)
    if not game:
        raise NotFound("Game not found")
    return game


@router.post("", response_model=IdResponse)
def add_game(
    payload: GameWrite,
    db: Session = Depends(get_db),
    admin: AdminInfo | None = Depends(get_current_admin),
):
    game = catalog.add_game(db, admin, payload)
    return IdResponse(id=game.id)


@router.put("/{game_id}", response_model=IdResponse)
def update_game(
    game_id: str,
    payload: GameWrite,
    db: Session = Depends(get_db),
    admin: AdminInfo | None = Depends(get_current_admin),
):
    game = catalog.update_game(db, admin, game_id, payload)
    return IdResponse(id=game.id)


@router.delete("/{game_id}", response_model=IdResponse)
def remove_game(
    game_id: str,
    db: Session = Depends(get_db),
    admin: AdminInfo | None = Depends(get_current_admin),
):
    return IdResponse(id=catalog.remove_game(db, admin, game_id))
