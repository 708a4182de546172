"""Buyer interest model - inbound inquiries attached to a property"""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from estate_listings.database import Base


class BuyerInterest(Base):
    """A buyer's expressed interest in a property. Rows are only ever inserted."""
    __tablename__ = "buyer_interests"

    id = Column(Integer, primary_key=True, index=True)

    property_id = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Contact
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    message = Column(Text, default="", nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    property = relationship("Property", back_populates="buyer_interests")
