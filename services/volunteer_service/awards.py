"""Award tier calculation.

Given a volunteer's age group and their logged sessions, work out total
hours, the recognition tier reached (bronze/silver/gold), the next tier and
percentage progress toward it.

Everything here is pure: callers pass the full session list on every call
and get a fresh ``TierStatus`` back. Nothing is cached or persisted.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Any, Optional

from services.volunteer_service.errors import InvalidAgeGroupError, InvalidSessionError
from services.volunteer_service.models.enums import AgeGroup, AwardTier, NextTier


@dataclass(frozen=True)
class TierThresholds:
    """Inclusive minimum cumulative hours for each tier."""

    bronze: float
    silver: float
    gold: float

    def minimum(self, tier: AwardTier) -> float:
        if tier == AwardTier.BRONZE:
            return self.bronze
        if tier == AwardTier.SILVER:
            return self.silver
        if tier == AwardTier.GOLD:
            return self.gold
        return 0.0


@dataclass(frozen=True)
class TierStatus:
    total_hours: float
    current_tier: AwardTier
    next_tier: NextTier
    next_tier_hours: float
    progress_percent: float


AWARD_THRESHOLDS: Mapping[AgeGroup, TierThresholds] = MappingProxyType(
    {
        AgeGroup.KIDS: TierThresholds(bronze=26, silver=50, gold=75),
        AgeGroup.TEENS: TierThresholds(bronze=50, silver=75, gold=100),
        AgeGroup.YOUNG_ADULTS: TierThresholds(bronze=100, silver=175, gold=250),
        AgeGroup.ADULTS: TierThresholds(bronze=100, silver=250, gold=500),
    }
)

AGE_GROUP_LABELS: Mapping[AgeGroup, str] = MappingProxyType(
    {
        AgeGroup.KIDS: "Kids (5-10 years)",
        AgeGroup.TEENS: "Teens (11-15 years)",
        AgeGroup.YOUNG_ADULTS: "Young Adults (16-18 years)",
        AgeGroup.ADULTS: "Adults (19+ years)",
    }
)

_unmapped = [group for group in AgeGroup if group not in AWARD_THRESHOLDS]
if _unmapped:
    raise RuntimeError(f"Award thresholds missing for age groups: {_unmapped}")


# ---------------------------------------------------------------------------
# Age groups
# ---------------------------------------------------------------------------


def age_group_for_age(age: int) -> AgeGroup:
    """Bucket a numeric age. Anything outside 5-18 counts as adults."""
    if 5 <= age <= 10:
        return AgeGroup.KIDS
    if 11 <= age <= 15:
        return AgeGroup.TEENS
    if 16 <= age <= 18:
        return AgeGroup.YOUNG_ADULTS
    return AgeGroup.ADULTS


def resolve_age_group(value: Any) -> AgeGroup:
    """Normalize an age group value, failing on anything unrecognized.

    This is the only place raw age group values are interpreted; there is
    no fallback to the adults table.
    """
    if isinstance(value, AgeGroup):
        return value
    if isinstance(value, str):
        try:
            return AgeGroup(value.strip().lower())
        except ValueError:
            raise InvalidAgeGroupError(value) from None
    raise InvalidAgeGroupError(value)


def age_group_label(age_group: Any) -> str:
    return AGE_GROUP_LABELS[resolve_age_group(age_group)]


def thresholds_for(age_group: Any) -> TierThresholds:
    return AWARD_THRESHOLDS[resolve_age_group(age_group)]


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def _duration_of(session: Any) -> float:
    if isinstance(session, Mapping):
        value = session.get("duration", session.get("duration_hours"))
    elif isinstance(session, Real):
        value = session
    else:
        value = getattr(session, "duration", None)
        if value is None:
            value = getattr(session, "duration_hours", None)

    if value is None:
        raise InvalidSessionError("Session has no duration", session)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSessionError(f"Session duration must be a number, got {value!r}", session)

    hours = float(value)
    if not math.isfinite(hours):
        raise InvalidSessionError(f"Session duration must be finite, got {hours}", session)
    if hours < 0:
        raise InvalidSessionError(f"Session duration cannot be negative, got {hours}", session)
    return hours


def total_hours(sessions: Iterable[Any]) -> float:
    """Sum session durations. Every session is validated, none are dropped."""
    return math.fsum(_duration_of(session) for session in sessions)


# ---------------------------------------------------------------------------
# Tier status
# ---------------------------------------------------------------------------


def _progress(total: float, floor: float, ceiling: float) -> float:
    percent = (total - floor) / (ceiling - floor) * 100
    return max(0.0, min(100.0, percent))


def compute_tier_status(age_group: Any, sessions: Iterable[Any]) -> TierStatus:
    """Compute the tier status for an age group and a full set of sessions.

    Tiers are checked top-down (gold, silver, bronze) against inclusive
    minimums, so a total that clears several thresholds lands on the
    highest. Progress interpolates linearly between the current tier's
    floor and the next tier's floor, clamped to [0, 100].

    Raises:
        InvalidAgeGroupError: ``age_group`` is not one of the four groups.
        InvalidSessionError: a session duration is missing, negative or
            not a finite number.
    """
    thresholds = AWARD_THRESHOLDS[resolve_age_group(age_group)]
    total = total_hours(sessions)

    if total >= thresholds.gold:
        return TierStatus(
            total_hours=total,
            current_tier=AwardTier.GOLD,
            next_tier=NextTier.COMPLETED,
            next_tier_hours=float(thresholds.gold),
            progress_percent=100.0,
        )
    if total >= thresholds.silver:
        return TierStatus(
            total_hours=total,
            current_tier=AwardTier.SILVER,
            next_tier=NextTier.GOLD,
            next_tier_hours=float(thresholds.gold),
            progress_percent=_progress(total, thresholds.silver, thresholds.gold),
        )
    if total >= thresholds.bronze:
        return TierStatus(
            total_hours=total,
            current_tier=AwardTier.BRONZE,
            next_tier=NextTier.SILVER,
            next_tier_hours=float(thresholds.silver),
            progress_percent=_progress(total, thresholds.bronze, thresholds.silver),
        )
    return TierStatus(
        total_hours=total,
        current_tier=AwardTier.NONE,
        next_tier=NextTier.BRONZE,
        next_tier_hours=float(thresholds.bronze),
        progress_percent=_progress(total, 0.0, thresholds.bronze),
    )


def hours_remaining(status: TierStatus) -> Optional[float]:
    """Hours still needed for the next tier, or None once gold is reached."""
    if status.next_tier == NextTier.COMPLETED:
        return None
    return max(0.0, status.next_tier_hours - status.total_hours)
