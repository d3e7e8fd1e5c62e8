"""
Default reference data: mood types, reasons, tasks, quotes and avatars.
"""
import logging
from typing import Dict, List
from sqlalchemy.orm import Session
from app.models.content import Avatar, AvatarAge, AvatarGender, Quote, Task
from app.models.mood import MoodType, Reason

logger = logging.getLogger(__name__)

MOOD_TYPES: List[str] = ["Happy", "Calm", "Sad", "Anxious", "Angry", "Tired"]

REASONS: List[str] = ["Work", "Family", "Friends", "Health", "Sleep", "Weather", "Money", "Other"]

TASKS: Dict[str, List[str]] = {
    "Happy": ["Share your good mood with a friend", "Write down three things you are grateful for"],
    "Calm": ["Take a slow walk outside", "Read a few pages of a book"],
    "Sad": ["Call someone you trust", "Listen to a favourite song"],
    "Anxious": ["Try five minutes of box breathing", "Write your worries down and set them aside"],
    "Angry": ["Go for a short run", "Count to ten before replying to anyone"],
    "Tired": ["Take a 20 minute nap", "Drink a glass of water and stretch"],
}

QUOTES: Dict[str, List[str]] = {
    "Happy": ["Happiness is not something ready made. It comes from your own actions."],
    "Calm": ["Within you, there is a stillness and a sanctuary."],
    "Sad": ["Even the darkest night will end and the sun will rise."],
    "Anxious": ["You don't have to control your thoughts. You just have to stop letting them control you."],
    "Angry": ["For every minute you are angry you lose sixty seconds of peace."],
    "Tired": ["Rest when you're weary. Refresh and renew yourself."],
}


def _avatar_url(mood: str, gender: AvatarGender, age: AvatarAge) -> str:
    return f"/avatars/{mood.lower()}_{gender.value}_{age.value}.png"


def seed_reference_data(db: Session) -> None:
    """Insert any missing reference rows; safe to run repeatedly."""
    existing = {m.name: m for m in db.query(MoodType).all()}
    for name in MOOD_TYPES:
        if name not in existing:
            existing[name] = MoodType(name=name)
            db.add(existing[name])

    known_reasons = {r.name for r in db.query(Reason).all()}
    for name in REASONS:
        if name not in known_reasons:
            db.add(Reason(name=name))
    db.flush()

    for mood, texts in TASKS.items():
        for text in texts:
            if not db.query(Task).filter(Task.text == text).first():
                db.add(Task(text=text, mood_type_id=existing[mood].id))

    for mood, texts in QUOTES.items():
        for text in texts:
            if not db.query(Quote).filter(Quote.text == text).first():
                db.add(Quote(text=text, mood_type_id=existing[mood].id))

    for mood in MOOD_TYPES:
        for gender in AvatarGender:
            for age in AvatarAge:
                url = _avatar_url(mood, gender, age)
                if not db.query(Avatar).filter(Avatar.image_url == url).first():
                    db.add(Avatar(gender=gender, age=age, image_url=url, mood_type_id=existing[mood].id))

    db.commit()
    logger.info("Reference data seeded")
