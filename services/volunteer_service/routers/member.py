"""Volunteer-facing endpoints: profile, sessions, timer and progress."""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from libs.common.config import get_settings
from libs.db.session import get_async_db
from services.volunteer_service.awards import (
    AGE_GROUP_LABELS,
    compute_tier_status,
    hours_remaining,
    thresholds_for,
)
from services.volunteer_service.routers._helpers import CurrentVolunteer
from services.volunteer_service.schemas import (
    ClockStatusResponse,
    ManualSessionCreate,
    ProgressResponse,
    SessionUpdate,
    TierThresholdsResponse,
    VolunteerResponse,
    VolunteerSessionResponse,
    VolunteerStatsResponse,
    VolunteerUpdate,
)
from services.volunteer_service.services import (
    add_manual_session,
    clock_in,
    clock_out,
    clock_status,
    delete_session,
    list_sessions,
    session_stats,
    update_session,
    update_volunteer,
)
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/volunteers", tags=["volunteers"])


# ── Profile ─────────────────────────────────────────────────────────


@router.get("/me", response_model=VolunteerResponse)
async def get_my_profile(volunteer: CurrentVolunteer):
    """Get my volunteer profile."""
    return volunteer


@router.patch("/me", response_model=VolunteerResponse)
async def update_my_profile(
    data: VolunteerUpdate,
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    """Update my profile. Changing age moves me to a new age group."""
    return await update_volunteer(db, volunteer, data)


@router.get("/me/stats", response_model=VolunteerStatsResponse)
async def my_stats(
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    """Session count, total hours and average session length."""
    sessions = await list_sessions(db, volunteer.id)
    return session_stats(sessions)


# ── Sessions ────────────────────────────────────────────────────────


@router.get("/me/sessions", response_model=list[VolunteerSessionResponse])
async def my_sessions(
    volunteer: CurrentVolunteer,
    limit: Optional[int] = Query(None, ge=1, le=500),
    recent: bool = False,
    db: AsyncSession = Depends(get_async_db),
):
    """List my sessions, most recent first.

    ``recent=true`` returns the short list shown under the timer.
    """
    if recent and limit is None:
        limit = get_settings().RECENT_SESSIONS_LIMIT
    return await list_sessions(db, volunteer.id, limit=limit)


@router.post(
    "/me/sessions", response_model=VolunteerSessionResponse, status_code=201
)
async def log_manual_session(
    data: ManualSessionCreate,
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    """Record a session from a date and a start/end time."""
    return await add_manual_session(db, volunteer.id, data)


@router.patch("/me/sessions/{session_id}", response_model=VolunteerSessionResponse)
async def edit_session(
    session_id: uuid.UUID,
    data: SessionUpdate,
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    return await update_session(db, volunteer.id, session_id, data)


@router.delete("/me/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_session(
    session_id: uuid.UUID,
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
) -> Response:
    await delete_session(db, volunteer.id, session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Timer ───────────────────────────────────────────────────────────


@router.get("/me/clock", response_model=ClockStatusResponse)
async def my_clock(volunteer: CurrentVolunteer):
    return clock_status(volunteer)


@router.post("/me/clock/in", response_model=ClockStatusResponse)
async def start_clock(
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    """Clock in. Fails with 409 if a timer is already running."""
    return await clock_in(db, volunteer)


@router.post(
    "/me/clock/out", response_model=VolunteerSessionResponse, status_code=201
)
async def stop_clock(
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    """Clock out and record the elapsed time as a session."""
    return await clock_out(db, volunteer)


# ── Progress ────────────────────────────────────────────────────────


@router.get("/me/progress", response_model=ProgressResponse)
async def my_progress(
    volunteer: CurrentVolunteer,
    db: AsyncSession = Depends(get_async_db),
):
    """Current award tier and progress toward the next one.

    Recomputed from the full session log on every request.
    """
    sessions = await list_sessions(db, volunteer.id)
    tier_status = compute_tier_status(volunteer.age_group, sessions)
    thresholds = thresholds_for(volunteer.age_group)
    label = AGE_GROUP_LABELS[volunteer.age_group]

    return ProgressResponse(
        total_hours=tier_status.total_hours,
        current_tier=tier_status.current_tier,
        next_tier=tier_status.next_tier,
        next_tier_hours=tier_status.next_tier_hours,
        progress_percent=tier_status.progress_percent,
        age_group=volunteer.age_group,
        age_group_label=label,
        hours_remaining=hours_remaining(tier_status),
        thresholds=TierThresholdsResponse(
            age_group=volunteer.age_group,
            age_group_label=label,
            bronze=thresholds.bronze,
            silver=thresholds.silver,
            gold=thresholds.gold,
        ),
    )
