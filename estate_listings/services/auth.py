"""Admin session gate - credential check and session tokens"""
from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from estate_listings.config import settings
from estate_listings.models.user import User, ADMIN_ROLE
from estate_listings.exceptions import AuthenticationError, AuthorizationError, ValidationError

logger = logging.getLogger(__name__)

# Password hashing context - argon2 (no 72-byte limit like bcrypt)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate password hash"""
    return pwd_context.hash(password)


def validate_password_strength(password: str) -> None:
    """Validate password meets requirements"""
    errors = []

    if len(password) < settings.PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters")

    if settings.PASSWORD_REQUIRE_UPPERCASE and not any(c.isupper() for c in password):
        errors.append("Password must contain at least one uppercase letter")

    if settings.PASSWORD_REQUIRE_LOWERCASE and not any(c.islower() for c in password):
        errors.append("Password must contain at least one lowercase letter")

    if settings.PASSWORD_REQUIRE_DIGIT and not any(c.isdigit() for c in password):
        errors.append("Password must contain at least one digit")

    if settings.PASSWORD_REQUIRE_SPECIAL:
        special_chars = "!@#$%^&*()_+-=[]{}|;':\",./<>?"
        if not any(c in special_chars for c in password):
            errors.append("Password must contain at least one special character")

    if errors:
        raise ValidationError(message="Password does not meet requirements", details={"errors": errors})


class SessionClaims(BaseModel):
    """Identity carried by an admin session token"""
    id: int
    email: str
    name: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def require_admin(session: Optional[SessionClaims]) -> SessionClaims:
    """Gate for lifecycle-mutating and admin-scoped operations"""
    if session is None:
        raise AuthenticationError(message="Sign in required")
    if not session.is_admin:
        raise AuthorizationError(message="Admin access required")
    return session


class AuthService:
    """Authentication service for admin users"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user for valid credentials, otherwise None"""
        if not email or not password:
            return None

        user = await self.get_user_by_email(email)

        if not user or not verify_password(password, user.hashed_password):
            logger.warning(f"Rejected login for {email.lower()}")
            return None

        if not user.is_active:
            logger.warning(f"Rejected login for disabled account {user.id}")
            return None

        # Update last login
        user.last_login = datetime.utcnow()
        await self.db.commit()

        logger.info(f"User {user.id} signed in")
        return user

    async def create_admin(self, email: str, password: str, name: Optional[str] = None) -> User:
        """Provision an administrator account"""
        validate_password_strength(password)

        if await self.get_user_by_email(email):
            raise ValidationError(message="Email already registered")

        user = User(
            email=email.lower(),
            hashed_password=get_password_hash(password),
            name=name,
            role=ADMIN_ROLE,
        )

        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)

        logger.info(f"Admin user {user.id} created")
        return user

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        result = await self.db.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    @staticmethod
    def create_session_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
        """Issue a JWT carrying the user's id, email, name and role"""
        expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
        to_encode = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "role": user.role,
            "exp": expire,
            "type": "access",
        }
        return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @staticmethod
    def decode_session(token: str) -> SessionClaims:
        """Decode and validate a session token"""
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError:
            raise AuthenticationError(message="Invalid or expired session")

        if payload.get("type") != "access":
            raise AuthenticationError(message="Invalid or expired session")

        try:
            return SessionClaims(
                id=int(payload["sub"]),
                email=payload["email"],
                name=payload.get("name"),
                role=payload.get("role"),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError(message="Invalid or expired session")
