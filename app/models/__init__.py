from app.models.game import Game
from app.models.tag import Tag
from app.models.user import User

__all__ = [
    "User",
    "Tag",
    "Game",
]
