from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .enums import QualificationLevel


class EducationRecord(BaseModel):
    """Declared education entry.

    ``is_premier_institution`` left as ``None`` means the applicant did not
    declare it; derivation then matches ``institution`` against the configured
    premier-institution list.
    """

    degree: str
    field: str = ""
    institution: str = ""
    year_of_passing: int | None = None
    is_premier_institution: bool | None = None
    is_doctorate: bool = False
    is_postgraduate: bool = False
    level: QualificationLevel | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ExperienceRecord(BaseModel):
    """Employment interval. A missing ``end_date`` means ongoing."""

    organization: str = ""
    designation: str = ""
    start_date: date
    end_date: date | None = None
    is_senior_grade_service: bool = False
    pay_level: str | None = None
    is_advanced_pay_level: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)


class ApplicantProfile(BaseModel):
    """Applicant document assembled by the profile-management layer."""

    applicant_id: str
    full_name: str | None = None
    date_of_birth: date
    education: list[EducationRecord] = Field(default_factory=list)
    experiences: list[ExperienceRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True)
