"""
Mood-linked content selection for tasks, quotes and avatars.
"""
from datetime import date
from typing import Callable, Iterable, Optional, Type, TypeVar
import logging
import random
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import ForbiddenError, NotFoundError
from app.models.content import Avatar, Quote, Task
from app.models.mood import MoodEntry
from app.models.user import User
from app.services.mood_service import get_for_day

logger = logging.getLogger(__name__)

T = TypeVar("T")


def pick_random(
    collection: Iterable[T],
    predicate: Callable[[T], bool],
    rng: Optional[random.Random] = None,
    label: str = "content"
) -> T:
    """Pick one item uniformly at random among those matching ``predicate``."""
    matches = [item for item in collection if predicate(item)]
    if not matches:
        raise NotFoundError(f"No {label} found")
    return (rng or random).choice(matches)


def require_todays_mood(user_id: int, day: date, db: Session) -> MoodEntry:
    """Content is only served once the user has checked in today."""
    entry = get_for_day(user_id, day, db)
    if not entry:
        raise ForbiddenError("Record today's mood first")
    return entry


def _pick_for_mood(
    model: Type[T],
    predicate: Callable[[T], bool],
    db: Session,
    rng: Optional[random.Random] = None,
    label: str = "content"
) -> T:
    """Load a reference collection and let ``pick_random`` apply the filter."""
    items = db.query(model).options(joinedload(model.mood_type)).all()
    return pick_random(items, predicate, rng=rng, label=label)


def pick_task(user: User, day: date, db: Session, rng: Optional[random.Random] = None) -> Task:
    entry = require_todays_mood(user.id, day, db)
    return _pick_for_mood(
        Task, lambda task: task.mood_type_id == entry.mood_type_id, db, rng=rng, label="task"
    )


def pick_quote(user: User, day: date, db: Session, rng: Optional[random.Random] = None) -> Quote:
    entry = require_todays_mood(user.id, day, db)
    return _pick_for_mood(
        Quote, lambda quote: quote.mood_type_id == entry.mood_type_id, db, rng=rng, label="quote"
    )


def avatar_matches(avatar: Avatar, user: User, mood_type_id: int) -> bool:
    """An avatar matches today's mood and any gender/age the user selected."""
    if avatar.mood_type_id != mood_type_id:
        return False
    if user.avatar_gender and avatar.gender.value != user.avatar_gender:
        return False
    if user.avatar_age and avatar.age.value != user.avatar_age:
        return False
    return True


def pick_avatar(user: User, day: date, db: Session, rng: Optional[random.Random] = None) -> Avatar:
    entry = require_todays_mood(user.id, day, db)
    return _pick_for_mood(
        Avatar,
        lambda avatar: avatar_matches(avatar, user, entry.mood_type_id),
        db,
        rng=rng,
        label="avatar"
    )
