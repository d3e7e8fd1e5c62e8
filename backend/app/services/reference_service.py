"""
Reference data: mood types, reasons and tasks.
"""
from typing import List
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.exceptions import ConflictError, NotFoundError
from app.models.content import Avatar, Quote, Task
from app.models.mood import MoodEntry, MoodType, Reason
from app.services.mood_service import resolve_mood_type

logger = logging.getLogger(__name__)


def list_mood_types(db: Session) -> List[MoodType]:
    return db.query(MoodType).order_by(MoodType.name).all()


def create_mood_type(name: str, db: Session) -> MoodType:
    """Create a mood type with a globally unique name."""
    name = name.strip()
    if db.query(MoodType).filter(MoodType.name == name).first():
        raise ConflictError(f"Mood type '{name}' already exists")

    mood_type = MoodType(name=name)
    try:
        db.add(mood_type)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Mood type '{name}' already exists")
    db.refresh(mood_type)
    logger.info(f"Created mood type '{name}'")
    return mood_type


def delete_mood_type(name: str, db: Session) -> None:
    """Delete a mood type unless mood entries or content still reference it."""
    mood_type = db.query(MoodType).filter(MoodType.name == name).first()
    if not mood_type:
        raise NotFoundError(f"Mood type '{name}' not found")

    in_use = db.query(MoodEntry).filter(MoodEntry.mood_type_id == mood_type.id).count()
    if in_use:
        logger.warning(f"Refusing to delete mood type '{name}' used by {in_use} mood entries")
        raise ConflictError(f"Mood type '{name}' is used by {in_use} mood entries")

    for model in (Task, Quote, Avatar):
        if db.query(model).filter(model.mood_type_id == mood_type.id).first():
            raise ConflictError(f"Mood type '{name}' is used by existing {model.__tablename__}")

    db.delete(mood_type)
    db.commit()
    logger.info(f"Deleted mood type '{name}'")


def list_reasons(db: Session) -> List[Reason]:
    return db.query(Reason).order_by(Reason.name).all()


def create_task(text: str, mood_type: str, db: Session) -> Task:
    """Create a task for a named mood type."""
    task = Task(text=text, mood_type=resolve_mood_type(mood_type, db))
    db.add(task)
    db.commit()
    db.refresh(task)
    return task
