from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import IntegerIdMixin, CreatedAtMixin

class Quote(Base, IntegerIdMixin, CreatedAtMixin):
    __tablename__ = "quotes"
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    text: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(100), nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)

    def as_public_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "author": self.author, "views": self.views}

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "author": self.author,
            "views": self.views,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
