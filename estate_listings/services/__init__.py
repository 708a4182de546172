"""Services package"""
from estate_listings.services.auth import AuthService, SessionClaims, require_admin, get_password_hash, verify_password
from estate_listings.services.property_store import PropertyStore, PropertyFilter, PropertyPage
from estate_listings.services.lifecycle import PropertyLifecycleService
from estate_listings.services.interest import InterestService

__all__ = [
    "AuthService",
    "SessionClaims",
    "require_admin",
    "get_password_hash",
    "verify_password",
    "PropertyStore",
    "PropertyFilter",
    "PropertyPage",
    "PropertyLifecycleService",
    "InterestService",
]
