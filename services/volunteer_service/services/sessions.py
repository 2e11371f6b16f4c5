"""Session log store.

Sessions are append/update/delete records keyed by volunteer. Durations for
manual entries always come from the stored time range, never from client
input, so ``duration_hours`` can't drift from ``start_time``/``end_time``.
"""

import uuid
from typing import Optional, Sequence

from fastapi import HTTPException, status
from libs.common.datetime_utils import hours_between
from libs.common.logging import get_logger
from services.volunteer_service.awards import total_hours
from services.volunteer_service.models import SessionSource, VolunteerSession
from services.volunteer_service.schemas import (
    ManualSessionCreate,
    SessionUpdate,
    VolunteerStatsResponse,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

MANUAL_ENTRY_DESCRIPTION = "Manual Entry"
CLOCK_SESSION_DESCRIPTION = "Volunteer Session"

DEFAULT_DESCRIPTIONS = {
    SessionSource.MANUAL: MANUAL_ENTRY_DESCRIPTION,
    SessionSource.CLOCK: CLOCK_SESSION_DESCRIPTION,
}


def _range_duration(start_time, end_time, overnight: bool = False) -> float:
    """Hours between two wall-clock times.

    With ``overnight`` an end before the start means the next day, which is
    how a timer that ran past midnight is stored.
    """
    duration = hours_between(start_time, end_time)
    if overnight and duration < 0:
        duration += 24
    if duration <= 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="End time must be after start time",
        )
    return duration


async def list_sessions(
    db: AsyncSession, volunteer_id: uuid.UUID, limit: Optional[int] = None
) -> Sequence[VolunteerSession]:
    """A volunteer's sessions, most recent first."""
    q = (
        select(VolunteerSession)
        .where(VolunteerSession.volunteer_id == volunteer_id)
        .order_by(
            VolunteerSession.date.desc(),
            VolunteerSession.start_time.desc(),
            VolunteerSession.created_at.desc(),
        )
    )
    if limit is not None:
        q = q.limit(limit)
    return (await db.execute(q)).scalars().all()


async def get_session(
    db: AsyncSession, volunteer_id: uuid.UUID, session_id: uuid.UUID
) -> VolunteerSession:
    """Load one of the volunteer's own sessions or fail with 404."""
    session = (
        await db.execute(
            select(VolunteerSession).where(
                VolunteerSession.id == session_id,
                VolunteerSession.volunteer_id == volunteer_id,
            )
        )
    ).scalar_one_or_none()
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    return session


async def add_manual_session(
    db: AsyncSession, volunteer_id: uuid.UUID, data: ManualSessionCreate
) -> VolunteerSession:
    duration = _range_duration(data.start_time, data.end_time)
    description = (data.description or "").strip() or MANUAL_ENTRY_DESCRIPTION

    session = VolunteerSession(
        volunteer_id=volunteer_id,
        date=data.date,
        start_time=data.start_time,
        end_time=data.end_time,
        duration_hours=duration,
        description=description,
        source=SessionSource.MANUAL,
    )
    db.add(session)
    await db.commit()
    await db.refresh(session)

    logger.info(
        "Logged %.2f manual hours for volunteer %s on %s",
        duration,
        volunteer_id,
        session.date,
    )
    return session


async def update_session(
    db: AsyncSession,
    volunteer_id: uuid.UUID,
    session_id: uuid.UUID,
    data: SessionUpdate,
) -> VolunteerSession:
    session = await get_session(db, volunteer_id, session_id)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    start_time = changes.get("start_time", session.start_time)
    end_time = changes.get("end_time", session.end_time)
    if "start_time" in changes or "end_time" in changes:
        session.duration_hours = _range_duration(
            start_time, end_time, overnight=session.source == SessionSource.CLOCK
        )
        session.start_time = start_time
        session.end_time = end_time

    if "date" in changes:
        session.date = changes["date"]
    if "description" in changes:
        session.description = (
            changes["description"].strip() or DEFAULT_DESCRIPTIONS[session.source]
        )

    await db.commit()
    await db.refresh(session)

    logger.info("Updated session %s fields=%s", session.id, sorted(changes))
    return session


async def delete_session(
    db: AsyncSession, volunteer_id: uuid.UUID, session_id: uuid.UUID
) -> None:
    session = await get_session(db, volunteer_id, session_id)
    duration = session.duration_hours
    await db.delete(session)
    await db.commit()

    logger.info(
        "Deleted session %s (%.2f hours) for volunteer %s",
        session_id,
        duration,
        volunteer_id,
    )


def session_stats(sessions: Sequence[VolunteerSession]) -> VolunteerStatsResponse:
    """Session count, total hours and average hours per session."""
    count = len(sessions)
    total = total_hours(sessions)
    return VolunteerStatsResponse(
        session_count=count,
        total_hours=total,
        average_hours_per_session=total / count if count else 0.0,
    )
