"""Public award threshold tables."""

from fastapi import APIRouter
from services.volunteer_service.awards import (
    AGE_GROUP_LABELS,
    AWARD_THRESHOLDS,
    resolve_age_group,
)
from services.volunteer_service.models import AgeGroup
from services.volunteer_service.schemas import TierThresholdsResponse

router = APIRouter(prefix="/awards", tags=["awards"])


def _thresholds_response(age_group: AgeGroup) -> TierThresholdsResponse:
    thresholds = AWARD_THRESHOLDS[age_group]
    return TierThresholdsResponse(
        age_group=age_group,
        age_group_label=AGE_GROUP_LABELS[age_group],
        bronze=thresholds.bronze,
        silver=thresholds.silver,
        gold=thresholds.gold,
    )


@router.get("/thresholds", response_model=list[TierThresholdsResponse])
async def list_thresholds():
    """Hours required for each tier, for every age group."""
    return [_thresholds_response(group) for group in AgeGroup]


@router.get("/thresholds/{age_group}", response_model=TierThresholdsResponse)
async def get_thresholds(age_group: str):
    """Hours required for each tier in one age group.

    Unknown groups raise InvalidAgeGroupError, answered with 422.
    """
    return _thresholds_response(resolve_age_group(age_group))
