"""Authentication router"""
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel
from typing import Optional
import logging

from estate_listings.config import settings
from estate_listings.database import get_db
from estate_listings.services.auth import AuthService, SessionClaims
from estate_listings.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

# auto_error=False: a missing token means "no session", the services decide whether that is allowed
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)


# Request/Response Models
class TokenResponse(BaseModel):
    success: bool = True
    access_token: str
    token_type: str = "bearer"
    user: SessionClaims


class SessionResponse(BaseModel):
    success: bool = True
    session: Optional[SessionClaims] = None


# Dependencies
async def get_session(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[SessionClaims]:
    """Decode the bearer token, if one was sent"""
    if not token:
        return None
    return AuthService.decode_session(token)


# Endpoints
@router.post("/login", response_model=TokenResponse)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Exchange admin credentials for a session token"""
    auth_service = AuthService(db)
    user = await auth_service.authenticate(form_data.username, form_data.password)
    if user is None:
        raise AuthenticationError(message="Invalid email or password")

    return TokenResponse(
        access_token=AuthService.create_session_token(user),
        user=SessionClaims(id=user.id, email=user.email, name=user.name, role=user.role),
    )


@router.get("/session", response_model=SessionResponse)
async def read_session(session: Optional[SessionClaims] = Depends(get_session)):
    """Current session claims, or null when signed out"""
    return SessionResponse(session=session)
