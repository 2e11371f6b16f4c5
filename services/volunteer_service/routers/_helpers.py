"""Shared helpers for volunteer routers."""

import uuid
from typing import Annotated

from fastapi import Depends, HTTPException, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.volunteer_service.models import Volunteer
from services.volunteer_service.services import get_volunteer
from sqlalchemy.ext.asyncio import AsyncSession


async def get_current_volunteer(
    user: Annotated[AuthUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_async_db),
) -> Volunteer:
    """Resolve the token subject to the volunteer's profile."""
    try:
        volunteer_id = uuid.UUID(user.user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return await get_volunteer(db, volunteer_id)


CurrentVolunteer = Annotated[Volunteer, Depends(get_current_volunteer)]
