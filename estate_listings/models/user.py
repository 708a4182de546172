"""User model for admin authentication"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from datetime import datetime
from estate_listings.database import Base

ADMIN_ROLE = "admin"


class User(Base):
    """Credential record for the admin review surface"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Authentication
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Profile
    name = Column(String(255), nullable=True)
    role = Column(String(50), default=ADMIN_ROLE, nullable=False)

    # Status
    is_active = Column(Boolean, default=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_login = Column(DateTime, nullable=True)
