from pathlib import Path
import sys

from sqlalchemy import select

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.core.config import get_settings
from app.db.session import get_session_factory
from app.models.tag import Tag


DEFAULT_TAGS: dict[str, tuple[str, ...]] = {
    "Genres": ("Action", "Adventure", "Horror", "Puzzle", "RPG", "Strategy"),
    "Play Style": ("Single-player", "Co-op", "Multiplayer", "Online", "Local"),
    "Visuals & Perspective": ("2D", "3D", "First-person", "Third-person"),
    "Platforms": ("PC", "PlayStation", "Xbox", "Switch", "Mobile"),
    "Stores & Access": ("Steam", "Epic Games", "Free to Play"),
}


def main() -> None:
    settings = get_settings()
    session_factory = get_session_factory()
    inserted = 0
    with session_factory() as db:
        for group, names in DEFAULT_TAGS.items():
            for name in names:
                existing = db.scalar(select(Tag).where(Tag.name == name))
                if existing:
                    continue
                db.add(Tag(name=name, group=group, created_by_name=settings.seed_tags_author))
                inserted += 1
        db.commit()
    print(f"Inserted tags: {inserted}")


if __name__ == "__main__":
    main()
