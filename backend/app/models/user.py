"""
User model for authentication, profile and streak state.
"""
from sqlalchemy import Column, String, Boolean, Date, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
from app.core.config import settings


class User(BaseModel):
    """User account; carries the streak counters maintained on check-in."""
    __tablename__ = "users"

    email = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Avatar selectors
    avatar_id = Column(Integer, ForeignKey("avatars.id"), nullable=True)
    avatar_gender = Column(String(10), nullable=True)  # "male" | "female"
    avatar_age = Column(String(10), nullable=True)  # "young" | "old"

    # Streak state, only mutated by the streak service
    last_mood_date = Column(Date, nullable=True)
    streak_current = Column(Integer, default=0, nullable=False)
    streak_longest = Column(Integer, default=0, nullable=False)

    # Reminder
    reminder_time = Column(String(5), default=lambda: settings.DEFAULT_REMINDER_TIME, nullable=False)
    reminder_enabled = Column(Boolean, default=False, nullable=False)

    # Relationships
    avatar = relationship("Avatar")
    mood_entries = relationship("MoodEntry", back_populates="user", cascade="all, delete-orphan")
