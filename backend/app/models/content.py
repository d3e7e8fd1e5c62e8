"""
Mood-linked content: tasks, quotes and avatars.
"""
from sqlalchemy import Column, String, Text, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class AvatarGender(str, enum.Enum):
    """Avatar gender selector."""
    MALE = "male"
    FEMALE = "female"


class AvatarAge(str, enum.Enum):
    """Avatar age selector."""
    YOUNG = "young"
    OLD = "old"


class Task(BaseModel):
    """Suggested activity for a mood."""
    __tablename__ = "tasks"

    text = Column(Text, nullable=False)
    mood_type_id = Column(Integer, ForeignKey("mood_types.id"), nullable=False, index=True)

    mood_type = relationship("MoodType")


class Quote(BaseModel):
    """Quote shown for a mood."""
    __tablename__ = "quotes"

    text = Column(Text, nullable=False)
    mood_type_id = Column(Integer, ForeignKey("mood_types.id"), nullable=False, index=True)

    mood_type = relationship("MoodType")


class Avatar(BaseModel):
    """Avatar image, optionally tied to a mood."""
    __tablename__ = "avatars"

    gender = Column(SQLEnum(AvatarGender, values_callable=lambda e: [m.value for m in e]), nullable=False)
    age = Column(SQLEnum(AvatarAge, values_callable=lambda e: [m.value for m in e]), nullable=False)
    image_url = Column(String(500), nullable=False)
    mood_type_id = Column(Integer, ForeignKey("mood_types.id"), nullable=True, index=True)

    mood_type = relationship("MoodType")
