"""Database models package"""
from estate_listings.models.user import User, ADMIN_ROLE
from estate_listings.models.property import Property, PropertyStatus, LandSizeUnit
from estate_listings.models.interest import BuyerInterest

__all__ = [
    "User",
    "ADMIN_ROLE",
    "Property",
    "PropertyStatus",
    "LandSizeUnit",
    "BuyerInterest",
]
