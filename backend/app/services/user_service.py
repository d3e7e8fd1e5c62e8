"""
User profile operations: registration, avatar selection and reminders.
"""
from datetime import date
from typing import Dict, Any
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.models.content import Avatar
from app.models.user import User
from app.schemas.user import AvatarSelection, ReminderUpdate, UserCreate
from app.services.streak_service import read_streak

logger = logging.getLogger(__name__)


def _get_avatar(avatar_id: int, db: Session) -> Avatar:
    avatar = db.query(Avatar).filter(Avatar.id == avatar_id).first()
    if not avatar:
        raise NotFoundError("Avatar not found")
    return avatar


def register_user(data: UserCreate, db: Session) -> User:
    """Create a user; email addresses are unique."""
    if db.query(User).filter(User.email == data.email).first():
        raise ConflictError("Email already in use")
    if data.avatar_id is not None:
        _get_avatar(data.avatar_id, db)

    user = User(
        email=data.email,
        hashed_password=get_password_hash(data.password),
        avatar_id=data.avatar_id
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already in use")
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(email: str, password: str, db: Session) -> User:
    """Return the user for valid credentials."""
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        raise UnauthorizedError("Invalid credentials")
    if not user.is_active:
        raise UnauthorizedError("User account is inactive")
    return user


def update_avatar(user: User, selection: AvatarSelection, db: Session) -> User:
    """Apply the avatar selectors that were sent."""
    fields = selection.model_dump(exclude_unset=True)
    if fields.get("avatar_id") is not None:
        _get_avatar(fields["avatar_id"], db)

    for key in ("avatar_id", "avatar_gender", "avatar_age"):
        if key in fields:
            setattr(user, key, fields[key])

    db.commit()
    db.refresh(user)
    return user


def set_reminder(user: User, reminder: ReminderUpdate, db: Session) -> Dict[str, Any]:
    """Update reminder time and/or enabled flag."""
    if reminder.time is not None:
        user.reminder_time = reminder.time
    if reminder.enabled is not None:
        user.reminder_enabled = reminder.enabled
    db.commit()
    db.refresh(user)
    return reminder_for(user)


def reminder_for(user: User) -> Dict[str, Any]:
    return {
        "time": user.reminder_time or settings.DEFAULT_REMINDER_TIME,
        "enabled": bool(user.reminder_enabled)
    }


def build_profile(user: User, day: date, db: Session) -> Dict[str, Any]:
    """Profile payload with the streak reconciled against ``day``."""
    streak = read_streak(user, day, db)
    return {
        "id": user.id,
        "email": user.email,
        "is_active": user.is_active,
        "avatar_id": user.avatar_id,
        "avatar_gender": user.avatar_gender,
        "avatar_age": user.avatar_age,
        "last_mood_date": user.last_mood_date,
        "created_at": user.created_at,
        "streak": {"current": streak.current, "longest": streak.longest},
        "reminder": reminder_for(user)
    }
