from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.common import AuditMixin, CreatedAtMixin, UUIDPrimaryKeyMixin


class Tag(UUIDPrimaryKeyMixin, CreatedAtMixin, AuditMixin, Base):
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    group: Mapped[str | None] = mapped_column(String(128), nullable=True)  # None for legacy tags
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
