from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import QualificationLevel, RemunerationBasis


class AdvertCriteria(BaseModel):
    """Single-tier thresholds declared by a contractual advert.

    Every unset threshold is treated as "no constraint".
    """

    advert_id: str
    designation: str = ""
    min_qualification: QualificationLevel | None = None
    min_experience_years: float | None = None
    max_experience_years: float | None = None
    max_age: int | None = None
    remuneration_min: float | None = None
    remuneration_max: float | None = None
    remuneration_basis: RemunerationBasis = RemunerationBasis.MONTHLY

    model_config = ConfigDict(extra="forbid", frozen=True)
