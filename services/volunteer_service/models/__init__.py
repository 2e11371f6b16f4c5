"""Volunteer Service models package."""

from services.volunteer_service.models.core import Volunteer, VolunteerSession
from services.volunteer_service.models.enums import (
    AgeGroup,
    AwardTier,
    NextTier,
    SessionSource,
)

__all__ = [
    "AgeGroup",
    "AwardTier",
    "NextTier",
    "SessionSource",
    "Volunteer",
    "VolunteerSession",
]
