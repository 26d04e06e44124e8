"""Enumerations shared by schemas and evaluators."""

from __future__ import annotations

from enum import Enum


class QualificationLevel(str, Enum):
    """Educational attainment levels used by contractual adverts."""

    CLASS_XII = "CLASS_XII"
    ITI = "ITI"
    DIPLOMA = "DIPLOMA"
    GRADUATE = "GRADUATE"
    LAW = "LAW"
    PROFESSIONAL = "PROFESSIONAL"
    POST_GRADUATE = "POST_GRADUATE"
    DOCTORATE = "DOCTORATE"


# Levels sharing a rank are interchangeable for advert minimums.
QUALIFICATION_RANK: dict[QualificationLevel, int] = {
    QualificationLevel.CLASS_XII: 1,
    QualificationLevel.ITI: 2,
    QualificationLevel.DIPLOMA: 2,
    QualificationLevel.GRADUATE: 3,
    QualificationLevel.LAW: 3,
    QualificationLevel.PROFESSIONAL: 4,
    QualificationLevel.POST_GRADUATE: 4,
    QualificationLevel.DOCTORATE: 5,
}


class EmpanelmentCategory(str, Enum):
    """Standard empanelment ladder, most senior first."""

    ADVISOR = "ADVISOR"
    SENIOR_CONSULTANT = "SENIOR_CONSULTANT"
    CONSULTANT = "CONSULTANT"
    PROJECT_ASSOCIATE = "PROJECT_ASSOCIATE"
    YOUNG_PROFESSIONAL = "YOUNG_PROFESSIONAL"


class RemunerationBasis(str, Enum):
    MONTHLY = "MONTHLY"
    DAILY = "DAILY"


class RemunerationTier(str, Enum):
    """Post-selection remuneration tiers derived from committee scores."""

    MAX = "MAX"
    NINETY_PERCENT = "NINETY_PERCENT"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"


class Pathway(str, Enum):
    EMPANELMENT = "empanelment"
    CONTRACTUAL = "contractual"
