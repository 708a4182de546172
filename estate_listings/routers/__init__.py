"""API routers package"""
from estate_listings.routers.auth import router as auth_router
from estate_listings.routers.properties import router as properties_router

__all__ = [
    "auth_router",
    "properties_router",
]
