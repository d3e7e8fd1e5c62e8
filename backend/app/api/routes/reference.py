"""
Reference data routes: mood types, reasons and task creation.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.content import (
    ContentResponse, MoodTypeCreate, MoodTypeResponse, ReasonResponse, TaskCreate
)
from app.api.dependencies import get_current_user
from app.services import reference_service

router = APIRouter(tags=["reference"])


@router.get("/mood-types", response_model=List[MoodTypeResponse])
async def list_mood_types(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all mood types."""
    return reference_service.list_mood_types(db)


@router.post("/mood-types", response_model=MoodTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_mood_type(
    data: MoodTypeCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a mood type."""
    return reference_service.create_mood_type(data.name, db)


@router.delete("/mood-types/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_mood_type(
    name: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a mood type that nothing references."""
    reference_service.delete_mood_type(name, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/reasons", response_model=List[ReasonResponse])
async def list_reasons(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all reasons."""
    return reference_service.list_reasons(db)


@router.post("/tasks", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a task for a mood type."""
    task = reference_service.create_task(data.text, data.mood_type, db)
    return ContentResponse(id=task.id, text=task.text, mood_type=task.mood_type.name)
