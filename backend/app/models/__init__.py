"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.mood import MoodEntry, MoodType, Reason
from app.models.content import Task, Quote, Avatar, AvatarGender, AvatarAge

__all__ = [
    "User",
    "MoodEntry",
    "MoodType",
    "Reason",
    "Task",
    "Quote",
    "Avatar",
    "AvatarGender",
    "AvatarAge",
]
