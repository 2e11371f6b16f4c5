"""Volunteer profile store: sign-up, login and profile edits."""

import uuid

from fastapi import HTTPException, status
from libs.auth.tokens import hash_password, verify_password
from libs.common.logging import get_logger
from services.volunteer_service.awards import age_group_for_age
from services.volunteer_service.models import Volunteer
from services.volunteer_service.schemas import SignupRequest, VolunteerUpdate
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_volunteer_by_email(db: AsyncSession, email: str) -> Volunteer | None:
    result = await db.execute(
        select(Volunteer).where(Volunteer.email == _normalize_email(email))
    )
    return result.scalar_one_or_none()


async def get_volunteer(db: AsyncSession, volunteer_id: uuid.UUID) -> Volunteer:
    """Load a volunteer or fail with 404."""
    volunteer = (
        await db.execute(select(Volunteer).where(Volunteer.id == volunteer_id))
    ).scalar_one_or_none()
    if not volunteer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Volunteer not found"
        )
    return volunteer


async def create_volunteer(db: AsyncSession, data: SignupRequest) -> Volunteer:
    """Create a profile. The age group is derived once from the age here."""
    email = _normalize_email(data.email)
    if await get_volunteer_by_email(db, email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists",
        )

    volunteer = Volunteer(
        name=data.name.strip(),
        email=email,
        phone=data.phone.strip(),
        age=data.age,
        age_group=age_group_for_age(data.age),
        password_hash=hash_password(data.password),
    )
    db.add(volunteer)
    await db.commit()
    await db.refresh(volunteer)

    logger.info(
        "Created volunteer %s (age_group=%s)", volunteer.id, volunteer.age_group.value
    )
    return volunteer


async def authenticate(db: AsyncSession, email: str, password: str) -> Volunteer:
    volunteer = await get_volunteer_by_email(db, email)
    if not volunteer or not verify_password(password, volunteer.password_hash):
        logger.info("Failed login for %s", _normalize_email(email))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return volunteer


async def update_volunteer(
    db: AsyncSession, volunteer: Volunteer, data: VolunteerUpdate
) -> Volunteer:
    """Apply a partial profile update.

    Changing the age re-derives the age group, which moves the volunteer
    onto a different threshold table on the next progress query.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in changes:
        changes["email"] = _normalize_email(changes["email"])
        existing = await get_volunteer_by_email(db, changes["email"])
        if existing and existing.id != volunteer.id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="An account with this email already exists",
            )

    for field, value in changes.items():
        setattr(volunteer, field, value.strip() if isinstance(value, str) else value)

    if "age" in changes:
        volunteer.age_group = age_group_for_age(volunteer.age)

    await db.commit()
    await db.refresh(volunteer)

    logger.info("Updated volunteer %s fields=%s", volunteer.id, sorted(changes))
    return volunteer
