from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.common import AuditMixin, CreatedAtMixin, UUIDPrimaryKeyMixin


class Game(UUIDPrimaryKeyMixin, CreatedAtMixin, AuditMixin, Base):
    __tablename__ = "games"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    additional_images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    video_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    additional_videos: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # tag names, matched against Tag.name without referential integrity
    categories: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
