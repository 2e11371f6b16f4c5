"""Volunteer Service business logic package."""

from services.volunteer_service.services.clock import (
    clock_in,
    clock_out,
    clock_status,
    elapsed_seconds,
)
from services.volunteer_service.services.profiles import (
    authenticate,
    create_volunteer,
    get_volunteer,
    get_volunteer_by_email,
    update_volunteer,
)
from services.volunteer_service.services.sessions import (
    add_manual_session,
    delete_session,
    get_session,
    list_sessions,
    session_stats,
    update_session,
)

__all__ = [
    "add_manual_session",
    "authenticate",
    "clock_in",
    "clock_out",
    "clock_status",
    "create_volunteer",
    "delete_session",
    "elapsed_seconds",
    "get_session",
    "get_volunteer",
    "get_volunteer_by_email",
    "list_sessions",
    "session_stats",
    "update_session",
    "update_volunteer",
]
