"""Clock-in / clock-out timer.

The open timer lives on the volunteer row (``clocked_in_at``) so it survives
app restarts. Clocking out turns the elapsed wall-clock time into a session.
"""

from datetime import datetime
from typing import Optional

from fastapi import HTTPException, status
from libs.common.datetime_utils import ensure_utc, to_local, utc_now
from libs.common.logging import get_logger
from services.volunteer_service.models import (
    SessionSource,
    Volunteer,
    VolunteerSession,
)
from services.volunteer_service.schemas import ClockStatusResponse
from services.volunteer_service.services.sessions import CLOCK_SESSION_DESCRIPTION
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


def elapsed_seconds(started_at: datetime, now: Optional[datetime] = None) -> float:
    """Seconds since ``started_at``; a clock that went backwards counts as 0."""
    now = ensure_utc(now or utc_now())
    return max(0.0, (now - ensure_utc(started_at)).total_seconds())


def clock_status(
    volunteer: Volunteer, now: Optional[datetime] = None
) -> ClockStatusResponse:
    if volunteer.clocked_in_at is None:
        return ClockStatusResponse(is_active=False)
    started_at = ensure_utc(volunteer.clocked_in_at)
    return ClockStatusResponse(
        is_active=True,
        clocked_in_at=started_at,
        elapsed_seconds=int(elapsed_seconds(started_at, now)),
    )


async def clock_in(
    db: AsyncSession, volunteer: Volunteer, now: Optional[datetime] = None
) -> ClockStatusResponse:
    if volunteer.clocked_in_at is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Already clocked in"
        )

    volunteer.clocked_in_at = ensure_utc(now or utc_now())
    await db.commit()
    await db.refresh(volunteer)

    logger.info("Volunteer %s clocked in at %s", volunteer.id, volunteer.clocked_in_at)
    return clock_status(volunteer, now)


async def clock_out(
    db: AsyncSession, volunteer: Volunteer, now: Optional[datetime] = None
) -> VolunteerSession:
    """Close the open timer and record it as a session."""
    if volunteer.clocked_in_at is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Not clocked in"
        )

    volunteer_id = volunteer.id
    started_at = ensure_utc(volunteer.clocked_in_at)
    ended_at = ensure_utc(now or utc_now())
    duration = elapsed_seconds(started_at, ended_at) / 3600
    # Stored date and times are wall-clock values, like manual entries
    local_start = to_local(started_at)
    local_end = to_local(ended_at)

    session = VolunteerSession(
        volunteer_id=volunteer_id,
        date=local_start.date(),
        start_time=local_start.time().replace(microsecond=0),
        end_time=local_end.time().replace(microsecond=0),
        duration_hours=duration,
        description=CLOCK_SESSION_DESCRIPTION,
        source=SessionSource.CLOCK,
    )
    db.add(session)
    volunteer.clocked_in_at = None
    await db.commit()
    await db.refresh(session)

    logger.info(
        "Volunteer %s clocked out: %.2f hours recorded", volunteer_id, duration
    )
    return session
