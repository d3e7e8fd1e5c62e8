"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Literal, Optional
from datetime import date, datetime


class UserCreate(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=6)
    avatar_id: Optional[int] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class StreakResponse(BaseModel):
    """Current and longest consecutive-day streak."""
    current: int
    longest: int


class ReminderUpdate(BaseModel):
    """Schema for reminder settings."""
    time: Optional[str] = Field(None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    enabled: Optional[bool] = None


class ReminderResponse(BaseModel):
    time: str
    enabled: bool


class AvatarSelection(BaseModel):
    """Schema for avatar update."""
    avatar_id: Optional[int] = None
    avatar_gender: Optional[Literal["male", "female"]] = None
    avatar_age: Optional[Literal["young", "old"]] = None


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    email: EmailStr
    is_active: bool
    avatar_id: Optional[int] = None
    avatar_gender: Optional[str] = None
    avatar_age: Optional[str] = None
    last_mood_date: Optional[date] = None
    created_at: datetime

    class Config:
        from_attributes = True


class UserProfile(UserResponse):
    """Profile with reconciled streak and reminder settings."""
    streak: StreakResponse
    reminder: ReminderResponse


class AuthResponse(BaseModel):
    """Schema for register/login response."""
    user: UserResponse
    token: str
    token_type: str = "bearer"
