"""Contractual advert screening."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...errors import ValidationError
from ...schemas import QUALIFICATION_RANK, AdvertCriteria, RemunerationBasis
from ..derivation import DerivedValues


@dataclass(slots=True, frozen=True)
class RemunerationBand:
    """Advert-declared remuneration range."""

    min: float
    max: float
    basis: RemunerationBasis


@dataclass(slots=True)
class ContractualScreeningResult:
    """Screening verdict for one contractual advert."""

    advert_id: str
    eligible: bool
    meets_qualification: bool
    meets_experience: bool
    meets_age: bool
    derived: DerivedValues
    suggested_remuneration_band: RemunerationBand | None = None
    reasons: list[str] = field(default_factory=list)


class ContractualScreener:
    """Check derived values against an advert's qualification, experience and age limits."""

    def screen(
        self,
        derived: DerivedValues,
        advert: AdvertCriteria,
    ) -> ContractualScreeningResult:
        self._validate_advert(advert)
        reasons: list[str] = []

        meets_qualification = True
        if advert.min_qualification is not None:
            actual = derived.highest_qualification
            meets_qualification = (
                QUALIFICATION_RANK[actual] >= QUALIFICATION_RANK[advert.min_qualification]
            )
            if not meets_qualification:
                reasons.append(
                    f"Qualification: requires {advert.min_qualification.value}, "
                    f"applicant has {actual.value}"
                )

        experience = derived.total_experience_years
        meets_experience = True
        if advert.min_experience_years is not None and experience < advert.min_experience_years:
            meets_experience = False
            reasons.append(
                f"Experience: requires at least {advert.min_experience_years:g} years, "
                f"applicant has {experience:.1f}"
            )
        if advert.max_experience_years is not None and experience > advert.max_experience_years:
            meets_experience = False
            reasons.append(
                f"Experience: allows at most {advert.max_experience_years:g} years, "
                f"applicant has {experience:.1f}"
            )

        meets_age = advert.max_age is None or derived.age <= advert.max_age
        if not meets_age:
            reasons.append(f"Age: maximum {advert.max_age}, applicant is {derived.age}")

        eligible = meets_qualification and meets_experience and meets_age
        band = self._band(advert) if eligible else None
        if eligible:
            reasons.append(f"Eligible for {advert.designation or advert.advert_id}")
            if band is not None:
                reasons.append(
                    f"Remuneration band: {band.min:,.0f} - {band.max:,.0f} ({band.basis.value})"
                )

        return ContractualScreeningResult(
            advert_id=advert.advert_id,
            eligible=eligible,
            meets_qualification=meets_qualification,
            meets_experience=meets_experience,
            meets_age=meets_age,
            derived=derived,
            suggested_remuneration_band=band,
            reasons=reasons,
        )

    @staticmethod
    def _band(advert: AdvertCriteria) -> RemunerationBand | None:
        low, high = advert.remuneration_min, advert.remuneration_max
        if low is None and high is None:
            return None
        if low is None:
            low = high
        if high is None:
            high = low
        return RemunerationBand(min=low, max=high, basis=advert.remuneration_basis)

    @staticmethod
    def _validate_advert(advert: AdvertCriteria) -> None:
        for name in (
            "min_experience_years",
            "max_experience_years",
            "max_age",
            "remuneration_min",
            "remuneration_max",
        ):
            value = getattr(advert, name)
            if value is not None and value < 0:
                raise ValidationError(
                    f"advert {advert.advert_id}: {name} must not be negative (got {value})",
                    field=name,
                    record=advert.advert_id,
                    value=value,
                )
        if (
            advert.remuneration_min is not None
            and advert.remuneration_max is not None
            and advert.remuneration_min > advert.remuneration_max
        ):
            raise ValidationError(
                f"advert {advert.advert_id}: remuneration_min {advert.remuneration_min:g} "
                f"exceeds remuneration_max {advert.remuneration_max:g}",
                field="remuneration_min",
                record=advert.advert_id,
                value=advert.remuneration_min,
            )


def screen_contractual(
    derived: DerivedValues,
    advert: AdvertCriteria,
) -> ContractualScreeningResult:
    """Screen ``derived`` against a single contractual advert."""
    return ContractualScreener().screen(derived, advert)
