"""
Mood ledger: at most one mood entry per user per calendar day.
"""
from collections import Counter
from datetime import date
from typing import Dict, List, Optional
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.utils import serialize_day
from app.models.mood import MoodEntry, MoodType, Reason
from app.models.user import User
from app.schemas.mood import MoodUpdate
from app.services.streak_service import record_check_in

logger = logging.getLogger(__name__)


def resolve_mood_type(name: str, db: Session) -> MoodType:
    """Look up a mood type by name, rejecting unknown names."""
    mood_type = db.query(MoodType).filter(MoodType.name == name).first() if name else None
    if not mood_type:
        raise ValidationError(f"Unknown mood type '{name}'")
    return mood_type


def resolve_reason(name: Optional[str], db: Session) -> Optional[Reason]:
    """Look up an optional reason by name; None passes through."""
    if name is None:
        return None
    reason = db.query(Reason).filter(Reason.name == name).first()
    if not reason:
        raise ValidationError(f"Unknown reason '{name}'")
    return reason


def get_for_day(user_id: int, day: date, db: Session) -> Optional[MoodEntry]:
    """Get the user's entry for an exact calendar day."""
    return db.query(MoodEntry).options(
        joinedload(MoodEntry.mood_type),
        joinedload(MoodEntry.reason)
    ).filter(
        MoodEntry.user_id == user_id,
        MoodEntry.date == day
    ).first()


def check_in(
    user_id: int,
    mood_type: str,
    day: date,
    db: Session,
    reason: Optional[str] = None,
    note: Optional[str] = None
) -> MoodEntry:
    """
    Create the entry for ``day`` and advance the user's streak.

    The entry and the streak change are committed together. If another
    check-in for the same (user, day) wins the race, the unique constraint
    rejects this one and nothing from it is persisted.
    """
    user = db.query(User).filter(User.id == user_id).with_for_update().populate_existing().first()
    if not user:
        raise NotFoundError("User not found")

    mood = resolve_mood_type(mood_type, db)
    mood_reason = resolve_reason(reason, db)

    if get_for_day(user_id, day, db):
        logger.warning(f"Duplicate check-in rejected for user {user_id} on {day}")
        raise ConflictError(f"Mood already recorded for {serialize_day(day)}")

    entry = MoodEntry(
        user_id=user_id,
        date=day,
        mood_type_id=mood.id,
        reason_id=mood_reason.id if mood_reason else None,
        note=note,
        created_on=day
    )
    try:
        db.add(entry)
        db.flush()
        record_check_in(user, day)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent check-in lost for user {user_id} on {day}")
        raise ConflictError(f"Mood already recorded for {serialize_day(day)}")
    except Exception:
        db.rollback()
        raise

    db.refresh(entry)
    logger.info(f"User {user_id} checked in '{mood.name}' on {day}")
    return entry


def update_for_day(user_id: int, day: date, patch: MoodUpdate, db: Session) -> MoodEntry:
    """
    Apply only the fields present in ``patch`` to the day's entry.
    References are resolved before anything is written, so a rejected patch
    leaves the entry untouched.
    """
    entry = get_for_day(user_id, day, db)
    if not entry:
        raise NotFoundError(f"No mood recorded for {serialize_day(day)}")

    fields = patch.model_dump(exclude_unset=True)

    try:
        if "mood_type" in fields:
            if fields["mood_type"] is None:
                raise ValidationError("mood_type cannot be null")
            mood = resolve_mood_type(fields["mood_type"], db)
        if "reason" in fields:
            mood_reason = resolve_reason(fields["reason"], db)
    except ValidationError:
        db.rollback()
        raise

    if "mood_type" in fields:
        entry.mood_type = mood
    if "reason" in fields:
        entry.reason = mood_reason
    if "note" in fields:
        entry.note = fields["note"]

    db.commit()
    db.refresh(entry)
    return entry


def list_range(
    user_id: int,
    db: Session,
    mood_type: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None
) -> List[MoodEntry]:
    """List the user's entries, newest day first, optionally filtered."""
    if start and end and start > end:
        raise ValidationError("start date must not be after end date")

    query = db.query(MoodEntry).options(
        joinedload(MoodEntry.mood_type),
        joinedload(MoodEntry.reason)
    ).filter(MoodEntry.user_id == user_id)

    if mood_type:
        query = query.filter(MoodEntry.mood_type_id == resolve_mood_type(mood_type, db).id)
    if start:
        query = query.filter(MoodEntry.date >= start)
    if end:
        query = query.filter(MoodEntry.date <= end)

    return query.order_by(MoodEntry.date.desc()).all()


def summarize(user_id: int, start: date, end: date, db: Session) -> Dict[str, Dict]:
    """Per-day mood labels and a mood histogram over ``[start, end]``."""
    entries = list_range(user_id, db, start=start, end=end)
    days = {serialize_day(e.date): e.mood_type.name for e in entries}
    counts = Counter(e.mood_type.name for e in entries)
    return {"days": days, "counts": dict(counts)}
