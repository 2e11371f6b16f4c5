import datetime as dt
import uuid
from datetime import datetime, time
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from sqlalchemy import Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Float, ForeignKey, Integer, String, Text, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from services.volunteer_service.models.enums import AgeGroup, SessionSource, enum_values

# ============================================================================
# MODELS
# ============================================================================


class Volunteer(Base):
    """A volunteer's profile, credentials and timer state."""

    __tablename__ = "volunteers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    age_group: Mapped[AgeGroup] = mapped_column(
        SAEnum(
            AgeGroup,
            name="age_group",
            values_callable=enum_values,
            create_constraint=False,
        ),
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(String(200), nullable=False)
    # Set while the volunteer is clocked in
    clocked_in_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    # Relationships
    sessions: Mapped[list["VolunteerSession"]] = relationship(
        back_populates="volunteer", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Volunteer {self.email} age_group={self.age_group}>"


class VolunteerSession(Base):
    """One recorded span of volunteer activity."""

    __tablename__ = "volunteer_sessions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    volunteer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("volunteers.id", ondelete="CASCADE"),
        index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    duration_hours: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[SessionSource] = mapped_column(
        SAEnum(
            SessionSource,
            name="session_source",
            values_callable=enum_values,
            create_constraint=False,
        ),
        default=SessionSource.MANUAL,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    # Relationships
    volunteer: Mapped["Volunteer"] = relationship(back_populates="sessions")

    def __repr__(self) -> str:
        return f"<VolunteerSession {self.date} hours={self.duration_hours:.2f}>"
