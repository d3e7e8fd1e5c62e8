"""
Mood routes: daily check-in, today's entry, and history.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.mood import MoodEntry
from app.models.user import User
from app.schemas.mood import MoodCreate, MoodResponse, MoodUpdate
from app.api.dependencies import get_current_user, get_today
from app.core.exceptions import NotFoundError
from app.services import mood_service

router = APIRouter(tags=["moods"])


def to_mood_response(entry: MoodEntry) -> MoodResponse:
    """Build response with mood type and reason names."""
    return MoodResponse(
        id=entry.id,
        user_id=entry.user_id,
        date=entry.date,
        mood_type=entry.mood_type.name,
        reason=entry.reason.name if entry.reason else None,
        note=entry.note,
        created_on=entry.created_on,
        created_at=entry.created_at,
        updated_at=entry.updated_at
    )


@router.post("/mood", response_model=MoodResponse, status_code=status.HTTP_201_CREATED)
async def create_mood(
    mood_data: MoodCreate,
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Record today's mood; one per day."""
    entry = mood_service.check_in(
        current_user.id,
        mood_data.mood_type,
        today,
        db,
        reason=mood_data.reason,
        note=mood_data.note
    )
    return to_mood_response(entry)


@router.get("/mood", response_model=MoodResponse)
async def get_todays_mood(
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Get today's mood entry."""
    entry = mood_service.get_for_day(current_user.id, today, db)
    if not entry:
        raise NotFoundError("No mood recorded today")
    return to_mood_response(entry)


@router.patch("/mood", response_model=MoodResponse)
async def update_todays_mood(
    patch: MoodUpdate,
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Update today's mood entry with the fields provided."""
    entry = mood_service.update_for_day(current_user.id, today, patch, db)
    return to_mood_response(entry)


@router.get("/moods", response_model=List[MoodResponse])
async def list_moods(
    mood_type: Optional[str] = Query(None),
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List mood history, newest first."""
    entries = mood_service.list_range(
        current_user.id, db, mood_type=mood_type, start=start, end=end
    )
    return [to_mood_response(e) for e in entries]


@router.get("/moods/{day}", response_model=MoodResponse)
async def get_mood_by_day(
    day: date,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the mood entry for a specific day."""
    entry = mood_service.get_for_day(current_user.id, day, db)
    if not entry:
        raise NotFoundError(f"No mood recorded for {day.isoformat()}")
    return to_mood_response(entry)
