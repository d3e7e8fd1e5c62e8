"""
Streak accounting for consecutive daily check-ins.

State lives on the user row as ``(streak_current, streak_longest,
last_mood_date)``. It only changes on a successful first check-in for a
day (``record_check_in``) and when it is read (``read_streak``), which
lazily zeroes a streak that has gone stale.
"""
from datetime import date
from typing import NamedTuple, Optional
import logging
from sqlalchemy.orm import Session
from app.core.days import previous_day
from app.models.user import User

logger = logging.getLogger(__name__)


class Streak(NamedTuple):
    current: int
    longest: int


def is_active_streak_day(last_mood_date: Optional[date], day: date) -> bool:
    """True when the last entry still keeps the streak alive on ``day``."""
    return last_mood_date is not None and last_mood_date in (day, previous_day(day))


def record_check_in(user: User, day: date) -> Streak:
    """
    Apply a new-day check-in to the user's streak counters.
    Does not commit; the caller commits it together with the mood entry.
    """
    current = user.streak_current or 0
    longest = user.streak_longest or 0
    last = user.last_mood_date

    if last == day:
        return Streak(current, longest)

    if last is not None and last == previous_day(day):
        current += 1
    else:
        current = 1

    user.streak_current = current
    user.last_mood_date = day
    if current > longest:
        user.streak_longest = current
        longest = current

    logger.debug(f"User {user.id} streak now {current} (longest {longest})")
    return Streak(current, longest)


def read_streak(user: User, day: date, db: Session) -> Streak:
    """
    Return the user's streak, resetting ``current`` to 0 if it has lapsed.

    The reset only applies while the row still carries the ``last_mood_date``
    that was judged stale, so a check-in committed in the meantime wins.
    """
    seen = user.last_mood_date
    if not is_active_streak_day(seen, day) and user.streak_current:
        query = db.query(User).filter(User.id == user.id, User.streak_current != 0)
        if seen is None:
            query = query.filter(User.last_mood_date.is_(None))
        else:
            query = query.filter(User.last_mood_date == seen)
        reset = query.update({User.streak_current: 0}, synchronize_session=False)
        db.commit()
        db.refresh(user)
        if reset:
            logger.info(f"Reset stale streak for user {user.id} (last mood {seen}, today {day})")
        else:
            logger.debug(f"Streak for user {user.id} changed before reset, keeping it")
    return Streak(user.streak_current or 0, user.streak_longest or 0)
