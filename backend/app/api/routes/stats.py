"""
Mood statistics routes.
"""
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.mood import MoodSummary
from app.api.dependencies import get_current_user
from app.services import mood_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/moods", response_model=MoodSummary)
async def get_mood_summary(
    start: date = Query(...),
    end: date = Query(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Mood per day and mood counts between start and end (inclusive)."""
    return mood_service.summarize(current_user.id, start, end, db)
