"""
Content routes: a random task, quote or avatar for today's mood.
"""
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.content import AvatarResponse, ContentResponse
from app.api.dependencies import get_current_user, get_today
from app.services import content_service

router = APIRouter(tags=["content"])


@router.get("/tasks", response_model=ContentResponse)
async def get_task(
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Random task matching today's mood."""
    task = content_service.pick_task(current_user, today, db)
    return ContentResponse(id=task.id, text=task.text, mood_type=task.mood_type.name)


@router.get("/quotes", response_model=ContentResponse)
async def get_quote(
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Random quote matching today's mood."""
    quote = content_service.pick_quote(current_user, today, db)
    return ContentResponse(id=quote.id, text=quote.text, mood_type=quote.mood_type.name)


@router.get("/avatars", response_model=AvatarResponse)
async def get_avatar(
    current_user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db)
):
    """Random avatar matching today's mood and the user's selectors."""
    avatar = content_service.pick_avatar(current_user, today, db)
    return AvatarResponse(
        id=avatar.id,
        gender=avatar.gender.value,
        age=avatar.age.value,
        image_url=avatar.image_url,
        mood_type=avatar.mood_type.name if avatar.mood_type else None
    )
