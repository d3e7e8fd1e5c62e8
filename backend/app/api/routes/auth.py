"""
Authentication routes for registration and login.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import UserCreate, UserLogin, AuthResponse, UserResponse
from app.core.security import create_access_token
from app.services.user_service import register_user, authenticate_user

router = APIRouter(prefix="/users", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return a token."""
    user = register_user(user_data, db)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id)
    )


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    user = authenticate_user(credentials.email, credentials.password, db)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id)
    )
