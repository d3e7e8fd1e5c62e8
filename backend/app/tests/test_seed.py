"""
Tests for reference data seeding.
"""
from app.db.seed import MOOD_TYPES, seed_reference_data
from app.models.content import Avatar, Quote, Task
from app.models.mood import MoodType, Reason


def test_seed_is_idempotent(db_session):
    seed_reference_data(db_session)
    counts = [db_session.query(model).count() for model in (MoodType, Reason, Task, Quote, Avatar)]

    seed_reference_data(db_session)

    assert [db_session.query(model).count() for model in (MoodType, Reason, Task, Quote, Avatar)] == counts
    assert counts[0] == len(MOOD_TYPES)
    assert counts[4] == len(MOOD_TYPES) * 4


def test_every_mood_has_content(db_session):
    seed_reference_data(db_session)
    for mood in db_session.query(MoodType).all():
        assert db_session.query(Task).filter(Task.mood_type_id == mood.id).count() > 0
        assert db_session.query(Quote).filter(Quote.mood_type_id == mood.id).count() > 0
