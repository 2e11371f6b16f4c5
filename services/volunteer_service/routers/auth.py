"""Sign-up, login and logout endpoints."""

from fastapi import APIRouter, Depends, Response, status
from libs.auth.tokens import create_access_token
from libs.db.session import get_async_db
from services.volunteer_service.models import Volunteer
from services.volunteer_service.routers._helpers import CurrentVolunteer
from services.volunteer_service.schemas import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    VolunteerResponse,
)
from services.volunteer_service.services import authenticate, create_volunteer
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(volunteer: Volunteer) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(str(volunteer.id), volunteer.email),
        volunteer=VolunteerResponse.model_validate(volunteer),
    )


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(
    data: SignupRequest,
    db: AsyncSession = Depends(get_async_db),
):
    """Create a volunteer profile and log in."""
    volunteer = await create_volunteer(db, data)
    return _auth_response(volunteer)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_async_db),
):
    """Exchange email and password for an access token."""
    volunteer = await authenticate(db, data.email, data.password)
    return _auth_response(volunteer)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(volunteer: CurrentVolunteer) -> Response:
    """Tokens are stateless; the client drops its copy."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
