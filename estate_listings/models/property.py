"""Property model for land/estate listings"""
from sqlalchemy import Column, Integer, String, DateTime, Text, Float, JSON, Enum, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from estate_listings.database import Base
import enum


class PropertyStatus(str, enum.Enum):
    """Lifecycle status controlling public visibility"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LandSizeUnit(str, enum.Enum):
    """Unit the land size is expressed in"""
    SQFT = "sqft"
    SQM = "sqm"
    ACRES = "acres"
    HECTARES = "hectares"


class Property(Base):
    """A listing submitted by a seller and reviewed by an administrator"""
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)

    # Listing details
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False, index=True)
    land_size = Column(Float, nullable=False)
    land_size_unit = Column(
        Enum(LandSizeUnit, name="land_size_unit", create_constraint=True),
        default=LandSizeUnit.SQFT,
        nullable=False,
    )
    asking_price = Column(Float, nullable=False)

    # Media
    images = Column(JSON, default=list, nullable=False)  # ordered list of URLs
    youtube_video = Column(String(500), nullable=True)

    # Review state
    status = Column(
        Enum(PropertyStatus, name="property_status", create_constraint=True),
        default=PropertyStatus.PENDING,
        nullable=False,
        index=True,
    )

    # Seller contact, set once at submission
    seller_name = Column(String(255), nullable=False)
    seller_phone = Column(String(50), nullable=False)
    seller_email = Column(String(255), nullable=False)
    seller_details = Column(Text, default="", nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    buyer_interests = relationship(
        "BuyerInterest",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="BuyerInterest.id",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_property_status_created", "status", "created_at"),
    )

    @property
    def seller(self) -> dict:
        return {
            "name": self.seller_name,
            "phone": self.seller_phone,
            "email": self.seller_email,
            "details": self.seller_details or "",
        }
