"""
Pydantic schemas for reference data and mood-linked content.
"""
from pydantic import BaseModel, Field
from typing import Optional


class MoodTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class MoodTypeResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class ReasonResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class TaskCreate(BaseModel):
    text: str = Field(..., min_length=1)
    mood_type: str = Field(..., min_length=1)


class ContentResponse(BaseModel):
    """Task or quote picked for a mood."""
    id: int
    text: str
    mood_type: str


class AvatarResponse(BaseModel):
    id: int
    gender: str
    age: str
    image_url: str
    mood_type: Optional[str] = None
