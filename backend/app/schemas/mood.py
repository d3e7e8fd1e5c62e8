"""
Pydantic schemas for mood entries.
"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Dict, Optional


class MoodCreate(BaseModel):
    """Schema for the daily check-in."""
    mood_type: str = Field(..., min_length=1)
    reason: Optional[str] = None
    note: Optional[str] = None


class MoodUpdate(BaseModel):
    """
    Partial update of a day's entry.
    Only fields explicitly sent are applied; ownership and day are never patchable.
    """
    mood_type: Optional[str] = Field(None, min_length=1)
    reason: Optional[str] = None
    note: Optional[str] = None


class MoodResponse(BaseModel):
    """Schema for mood response."""
    id: int
    user_id: int
    date: date
    mood_type: str
    reason: Optional[str] = None
    note: Optional[str] = None
    created_on: date
    created_at: datetime
    updated_at: datetime


class MoodSummary(BaseModel):
    """Per-day labels and per-mood histogram over a date range."""
    days: Dict[str, str]
    counts: Dict[str, int]
