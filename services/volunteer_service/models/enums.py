"""Enum definitions for volunteer service models."""

import enum


def enum_values(enum_cls):
    """Return persistent DB values for SAEnum mappings."""
    return [member.value for member in enum_cls]


class AgeGroup(str, enum.Enum):
    KIDS = "kids"  # 5-10
    TEENS = "teens"  # 11-15
    YOUNG_ADULTS = "young_adults"  # 16-18
    ADULTS = "adults"  # 19+ and anything outside the bands above


class AwardTier(str, enum.Enum):
    NONE = "none"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"


class NextTier(str, enum.Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    COMPLETED = "completed"


class SessionSource(str, enum.Enum):
    MANUAL = "manual"
    CLOCK = "clock"
