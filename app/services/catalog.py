import logging
import re
from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateName, NotFound, TagInUse, Unauthorized, ValidationFailed
from app.models.common import utcnow
from app.models.game import Game
from app.models.tag import Tag
from app.schemas.games import GameWrite
from app.schemas.tags import TagWrite
from app.services.admin_gate import AdminInfo

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\w+")


def _tokenize(text: str | None) -> list[str]:
    if not text:
        return []
    return _WORD_RE.findall(text.lower())


def _title_matches(title: str, terms: list[str]) -> bool:
    """Whole-token match on every term but the last, which may be a token prefix."""
    tokens = _tokenize(title)
    *exact, last = terms
    token_set = set(tokens)
    if any(term not in token_set for term in exact):
        return False
    return any(token.startswith(last) for token in tokens)


def _require_admin(admin: AdminInfo | None, message: str) -> AdminInfo:
    if admin is None:
        logger.warning("Denied catalog mutation: %s", message)
        raise Unauthorized(message)
    return admin


# Queries


def list_games(db: Session, categories: Iterable[str] | None = None, search_query: str | None = None) -> list[Game]:
    """Games newest first, optionally title-searched and restricted to any of ``categories``.

    Search terms are word tokens of ``search_query``, compared case-insensitively
    against the title tokens: each must equal a title token, except the last which
    only has to prefix one. Category filtering is an OR across the requested names.
    """
    terms = _tokenize(search_query)
    stmt = select(Game).order_by(Game.created_at.desc())
    games = list(db.scalars(stmt).all())
    if terms:
        games = [game for game in games if _title_matches(game.title, terms)]

    wanted = set(categories or ())
    if wanted:
        games = [game for game in games if wanted.intersection(game.categories or ())]
    return games


def get_game(db: Session, game_id: str) -> Game | None:
    return db.get(Game, game_id)


def list_tags(db: Session) -> list[Tag]:
    return list(db.scalars(select(Tag).order_by(Tag.created_at.asc())).all())


def list_tag_names(db: Session) -> list[str]:
    return [tag.name for tag in list_tags(db)]


def group_tags(tags: Sequence[Tag]) -> dict[str | None, list[Tag]]:
    """Bucket tags by their stored group in first-seen order; ungrouped tags land under ``None``."""
    grouped: dict[str | None, list[Tag]] = {}
    for tag in tags:
        grouped.setdefault(tag.group, []).append(tag)
    return grouped


# Game mutations


def _apply_game_fields(game: Game, fields: GameWrite) -> None:
    if not fields.categories:
        raise ValidationFailed("A game needs at least one category")
    game.title = fields.title
    game.description = fields.description
    game.image_url = fields.image_url
    game.additional_images = list(fields.additional_images or [])
    game.video_url = fields.video_url
    game.additional_videos = list(fields.additional_videos or [])
    game.categories = list(dict.fromkeys(fields.categories))


def add_game(db: Session, admin: AdminInfo | None, fields: GameWrite) -> Game:
    admin = _require_admin(admin, "You are not authorized to add games")

    game = Game(created_by=admin.user_id, created_by_name=admin.name)
    _apply_game_fields(game, fields)
    db.add(game)
    db.commit()
    db.refresh(game)
    logger.info("Admin %s added game %s (%s)", admin.name, game.id, game.title)
    return game


def update_game(db: Session, admin: AdminInfo | None, game_id: str, fields: GameWrite) -> Game:
    admin = _require_admin(admin, "You are not authorized to edit games")

    game = db.get(Game, game_id)
    if game is None:
        raise NotFound("Game not found")

    _apply_game_fields(game, fields)
    game.updated_at = utcnow()
    game.updated_by = admin.user_id
    game.updated_by_name = admin.name
    db.add(game)
    db.commit()
    db.refresh(game)
    logger.info("Admin %s updated game %s", admin.name, game.id)
    return game


def remove_game(db: Session, admin: AdminInfo | None, game_id: str) -> str:
    admin = _require_admin(admin, "You are not authorized to delete games")

    game = db.get(Game, game_id)
    if game is not None:
        db.delete(game)
        db.commit()
        logger.info("Admin %s deleted game %s", admin.name, game_id)
    return game_id


# Tag mutations


def _find_tag_by_name(db: Session, name: str, exclude_id: str | None = None) -> Tag | None:
    stmt = select(Tag).where(Tag.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Tag.id != exclude_id)
    return db.scalars(stmt.limit(1)).first()


def _commit_tag(db: Session, duplicate_message: str) -> None:
    # the unique index on tags.name still catches a concurrent insert or rename
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateName(duplicate_message) from exc


def add_tag(db: Session, admin: AdminInfo | None, fields: TagWrite) -> Tag:
    admin = _require_admin(admin, "You are not authorized to add tags")

    if _find_tag_by_name(db, fields.name) is not None:
        raise DuplicateName("This tag already exists")

    tag = Tag(
        name=fields.name,
        group=fields.group,
        description=fields.description,
        created_by=admin.user_id,
        created_by_name=admin.name,
    )
    db.add(tag)
    _commit_tag(db, "This tag already exists")
    db.refresh(tag)
    logger.info("Admin %s added tag %s", admin.name, tag.name)
    return tag


def update_tag(db: Session, admin: AdminInfo | None, tag_id: str, fields: TagWrite) -> Tag:
    admin = _require_admin(admin, "You are not authorized to edit tags")

    tag = db.get(Tag, tag_id)
    if tag is None:
        raise NotFound("Tag not found")

    if _find_tag_by_name(db, fields.name, exclude_id=tag_id) is not None:
        raise DuplicateName("Another tag already has this name")

    # games keep the old name in their categories; renames do not cascade
    tag.name = fields.name
    tag.group = fields.group
    tag.description = fields.description
    tag.updated_at = utcnow()
    tag.updated_by = admin.user_id
    tag.updated_by_name = admin.name
    db.add(tag)
    _commit_tag(db, "Another tag already has this name")
    db.refresh(tag)
    logger.info("Admin %s updated tag %s", admin.name, tag.id)
    return tag


def remove_tag(db: Session, admin: AdminInfo | None, tag_id: str) -> str:
    admin = _require_admin(admin, "You are not authorized to delete tags")

    tag = db.get(Tag, tag_id)
    if tag is None:
        raise NotFound("Tag not found")

    games = db.scalars(select(Game)).all()
    if any(tag.name in (game.categories or ()) for game in games):
        raise TagInUse("This tag cannot be deleted because some games use it")

    db.delete(tag)
    db.commit()
    logger.info("Admin %s deleted tag %s", admin.name, tag_id)
    return tag_id
