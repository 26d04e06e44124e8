"""Pydantic schema definitions for screening inputs."""

from __future__ import annotations

from .advert import AdvertCriteria
from .application import ApplicationRecord
from .enums import (
    QUALIFICATION_RANK,
    EmpanelmentCategory,
    Pathway,
    QualificationLevel,
    RemunerationBasis,
    RemunerationTier,
)
from .evaluation import EvaluationSubScores
from .profile import ApplicantProfile, EducationRecord, ExperienceRecord
from .rules import CategoryRule, EligibilityRule, EmpanelmentRuleSet

__all__ = [
    "AdvertCriteria",
    "ApplicationRecord",
    "ApplicantProfile",
    "CategoryRule",
    "EducationRecord",
    "EligibilityRule",
    "EmpanelmentCategory",
    "EmpanelmentRuleSet",
    "EvaluationSubScores",
    "ExperienceRecord",
    "Pathway",
    "QUALIFICATION_RANK",
    "QualificationLevel",
    "RemunerationBasis",
    "RemunerationTier",
]
