"""Authentication endpoints and the bearer-token dependency."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from schemas import LoginResponse, UserLogin, UserRegister, UserResponse
from services.auth_service import AuthService, create_access_token, decode_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    """Resolve the caller's user ID from the ``Authorization: Bearer`` header.

    Runs before any data access in every protected route.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid.
    """
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    user_id = decode_access_token(token.strip())
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return user_id


@router.post("/register", response_model=UserResponse, status_code=201)
def register(data: UserRegister, db: Session = Depends(get_db)):
    """Register a new user."""
    try:
        user = AuthService.register(db, email=data.email, password=data.password, name=data.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return user


@router.post("/login", response_model=LoginResponse)
def login(data: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token."""
    user = AuthService.authenticate(db, email=data.email, password=data.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return LoginResponse(
        message="Login successful!",
        token=create_access_token(user.id, user.role),
        user=UserResponse.model_validate(user),
    )
