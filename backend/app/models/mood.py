"""
Mood models: the daily entry plus the mood-type and reason vocabularies.
"""
from sqlalchemy import Column, String, Date, Text, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class MoodType(BaseModel):
    """Named mood category, e.g. "Happy"."""
    __tablename__ = "mood_types"

    name = Column(String(50), unique=True, nullable=False, index=True)


class Reason(BaseModel):
    """Optional reason attached to a mood entry, e.g. "Work"."""
    __tablename__ = "reasons"

    name = Column(String(100), unique=True, nullable=False, index=True)


class MoodEntry(BaseModel):
    """Mood model for one entry per user per calendar day."""
    __tablename__ = "mood_entries"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    mood_type_id = Column(Integer, ForeignKey("mood_types.id"), nullable=False, index=True)
    reason_id = Column(Integer, ForeignKey("reasons.id"), nullable=True)
    note = Column(Text, nullable=True)
    created_on = Column(Date, nullable=False)

    # Relationships
    user = relationship("User", back_populates="mood_entries")
    mood_type = relationship("MoodType")
    reason = relationship("Reason")

    # Unique constraint: one mood per user per date
    __table_args__ = (
        UniqueConstraint('user_id', 'date', name='uq_user_date_mood'),
    )
