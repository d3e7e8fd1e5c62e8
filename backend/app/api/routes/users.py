"""
User profile routes: profile, avatar, reminder and streak.
"""
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import (
    AvatarSelection, ReminderResponse, ReminderUpdate, StreakResponse, UserProfile
)
from app.models.user import User
from app.api.dependencies import get_current_user, get_today
from app.services import user_service
from app.services.streak_service import read_streak

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserProfile)
async def get_profile(
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Get current user profile with reconciled streak."""
    return user_service.build_profile(current_user, today, db)


@router.patch("/avatar", response_model=UserProfile)
async def update_avatar(
    selection: AvatarSelection,
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Update avatar and avatar selectors."""
    user = user_service.update_avatar(current_user, selection, db)
    return user_service.build_profile(user, today, db)


@router.post("/reminder", response_model=ReminderResponse)
async def set_reminder(
    reminder: ReminderUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set daily reminder time and enabled flag."""
    return user_service.set_reminder(current_user, reminder, db)


@router.get("/streak", response_model=StreakResponse)
async def get_streak(
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Get current and longest streak, resetting a lapsed streak."""
    streak = read_streak(current_user, today, db)
    return StreakResponse(current=streak.current, longest=streak.longest)
