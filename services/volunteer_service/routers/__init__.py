"""Volunteer service routers."""

from services.volunteer_service.routers.auth import router as auth_router
from services.volunteer_service.routers.awards import router as awards_router
from services.volunteer_service.routers.member import router as volunteer_router

__all__ = [
    "auth_router",
    "awards_router",
    "volunteer_router",
]
