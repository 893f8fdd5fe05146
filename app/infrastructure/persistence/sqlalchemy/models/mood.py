"""
SQLAlchemy model for MoodEntry entities.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.entities.mood import MoodEntry
from app.domain.enums.mood_type import MoodType
from app.infrastructure.persistence.sqlalchemy.models.base import Base, UserOwnedMixin


class MoodModel(UserOwnedMixin, Base):
    """SQLAlchemy model for the MoodEntry entity, mapped to the 'moods' table."""

    __tablename__ = "moods"

    mood: Mapped[str] = mapped_column(String(16), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Mood(id={self.id}, mood={self.mood})>"

    @classmethod
    def from_domain(cls, entry: MoodEntry) -> "MoodModel":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            date=entry.date,
            mood=entry.mood.value,
            notes=entry.notes,
        )

    def to_domain(self) -> MoodEntry:
        return MoodEntry(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            mood=MoodType(self.mood),
            notes=self.notes,
        )
