"""
Authentication endpoints: sign-up and sign-in.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.schemas.user import UserCreate, UserResponse, UserLogin, SessionResponse
from eventstay.services.auth_service import register_user, authenticate_user

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/sign-up", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user account."""
    user = await register_user(db, user_data)
    return user


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(login_data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Authenticate and receive a JWT access token."""
    user, token = await authenticate_user(db, login_data)
    return SessionResponse(user=UserResponse.model_validate(user), access_token=token)
