"""Authentication service - password hashing and bearer tokens."""

import logging
from datetime import timedelta
from typing import Optional

import bcrypt
import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import settings
from models import User
from utils.timestamps import utc_now

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def create_access_token(user_id: str, role: str = "user") -> str:
    """Issue a signed bearer token for a user."""
    now = utc_now()
    payload = {
        "sub": user_id,
        "role": role,
        "iat": now,
        "exp": now + timedelta(hours=settings.JWT_EXPIRES_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Verify a bearer token and return its user ID.

    Returns:
        The ``sub`` claim, or None if the token is invalid, expired or has
        no subject.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        logger.debug("Rejected bearer token", exc_info=True)
        return None
    user_id = payload.get("sub")
    return user_id if isinstance(user_id, str) and user_id else None


class AuthService:
    """Service for registering users and logging them in."""

    @staticmethod
    def register(
        db: Session, *, email: str, password: str, name: Optional[str] = None
    ) -> User:
        """Create a user with a hashed password.

        Raises:
            ValueError: If the email is already registered.
        """
        normalized = email.strip().lower()
        if db.query(User).filter(User.email == normalized).first():
            raise ValueError("User already exists")

        user = User(email=normalized, name=name, password_hash=hash_password(password))
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ValueError("User already exists")
        db.refresh(user)
        logger.info("User registered: id=%s", user.id)
        return user

    @staticmethod
    def authenticate(db: Session, *, email: str, password: str) -> User | None:
        """Return the user if the credentials match, else None."""
        user = db.query(User).filter(User.email == email.strip().lower()).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            return None
        return user
