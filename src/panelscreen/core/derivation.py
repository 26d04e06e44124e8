"""Temporal derivation of screening quantities from an applicant profile."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Iterable

import pendulum
from rapidfuzz import fuzz, utils

from ..errors import ValidationError
from ..schemas import (
    QUALIFICATION_RANK,
    ApplicantProfile,
    EducationRecord,
    ExperienceRecord,
    QualificationLevel,
)

_DEFAULT_DEGREE_KEYWORDS: dict[QualificationLevel, tuple[str, ...]] = {
    QualificationLevel.DOCTORATE: ("PHD", "DPHIL", "DOCTORATE"),
    QualificationLevel.POST_GRADUATE: (
        "MTECH", "MSC", "MA", "MCOM", "MBA", "MCA", "MPHIL", "LLM",
        "MASTER", "MASTERS", "PGDM", "POSTGRADUATE", "MED", "MFA", "MPHARM",
        "MDES", "MSW", "MPA", "MPP", "MLIB", "MVSC",
    ),
    QualificationLevel.PROFESSIONAL: (
        "BTECH", "BE", "BARCH", "MBBS", "BDS", "CA", "ICWA", "CMA",
    ),
    QualificationLevel.LAW: ("LLB", "LAW"),
    QualificationLevel.GRADUATE: (
        "BA", "BSC", "BCOM", "BBA", "BCA", "BACHELOR", "BACHELORS",
        "GRADUATE", "GRADUATION", "BED", "BFA", "BPHARM", "BDES", "BSW", "BMS",
        "BLIB", "BVSC", "BHM", "BPED",
    ),
    QualificationLevel.DIPLOMA: ("DIPLOMA",),
    QualificationLevel.ITI: ("ITI", "NCVT", "SCVT"),
}

_TOKEN_RE = re.compile(r"[A-Z]+")
# Dotted abbreviations such as "B.Pharm" or "M.E." when no keyword matched.
_ABBREVIATION_PREFIXES: tuple[tuple[re.Pattern[str], QualificationLevel], ...] = (
    (re.compile(r"^\s*M\.\s*[A-Z]"), QualificationLevel.POST_GRADUATE),
    (re.compile(r"^\s*B\.\s*[A-Z]"), QualificationLevel.GRADUATE),
)


@dataclass
class DerivationConfig:
    """Settings for temporal derivation."""

    days_per_year: float = 365.25
    precision: int = 1
    premier_institutions: tuple[str, ...] = (
        "IIT",
        "Indian Institute of Technology",
        "IIM",
        "Indian Institute of Management",
        "ISI",
        "Indian Statistical Institute",
        "IISc",
        "Indian Institute of Science",
        "Delhi School of Economics",
        "NIT",
        "National Institute of Technology",
    )
    premier_match_threshold: float = 90.0
    degree_keywords: dict[QualificationLevel, tuple[str, ...]] = field(
        default_factory=lambda: dict(_DEFAULT_DEGREE_KEYWORDS)
    )


@dataclass(slots=True, frozen=True)
class DerivedValues:
    """Quantities the eligibility rules are evaluated against."""

    age: int = 0
    total_experience_years: float = 0.0
    senior_grade_service_years: float = 0.0
    advanced_pay_level_years: float = 0.0
    has_doctorate: bool = False
    has_postgraduate: bool = False
    has_premier_degree: bool = False
    highest_qualification: QualificationLevel = QualificationLevel.CLASS_XII
    reference_date: date | None = None


class TemporalDeriver:
    """Convert dated profile records into derived screening values."""

    def __init__(
        self,
        *,
        config: DerivationConfig | None = None,
        today_provider: Callable[[], Any] | None = None,
    ) -> None:
        self._config = config or DerivationConfig()
        self._today_provider = today_provider or pendulum.today

    def derive(
        self,
        profile: ApplicantProfile,
        reference_date: date | str | None = None,
    ) -> DerivedValues:
        as_of = self._resolve_reference_date(reference_date)
        born = _as_pendulum_date(profile.date_of_birth)
        if born > as_of:
            raise ValidationError(
                f"date_of_birth {born.isoformat()} is after the reference date {as_of.isoformat()}",
                field="date_of_birth",
                value=profile.date_of_birth,
            )

        spans = self._experience_spans(profile.experiences, as_of)
        education = profile.education

        return DerivedValues(
            age=_completed_years(born, as_of),
            total_experience_years=self._years(days for days, _ in spans),
            senior_grade_service_years=self._years(
                days for days, record in spans if record.is_senior_grade_service
            ),
            advanced_pay_level_years=self._years(
                days for days, record in spans if record.is_advanced_pay_level
            ),
            has_doctorate=any(item.is_doctorate for item in education),
            has_postgraduate=any(item.is_postgraduate for item in education),
            has_premier_degree=any(self._is_premier(item) for item in education),
            highest_qualification=self.highest_qualification(education),
            reference_date=as_of,
        )

    def highest_qualification(self, education: Iterable[EducationRecord]) -> QualificationLevel:
        best = QualificationLevel.CLASS_XII
        for record in education:
            level = self._classify(record)
            if QUALIFICATION_RANK[level] > QUALIFICATION_RANK[best]:
                best = level
        return best

    def _classify(self, record: EducationRecord) -> QualificationLevel:
        if record.is_doctorate:
            return QualificationLevel.DOCTORATE
        if record.is_postgraduate:
            return QualificationLevel.POST_GRADUATE

        candidates: list[QualificationLevel] = []
        if record.level is not None:
            candidates.append(record.level)
        tokens = set(_TOKEN_RE.findall(record.degree.upper().replace(".", "")))
        matched = [
            level
            for level, keywords in self._config.degree_keywords.items()
            if tokens.intersection(keywords)
        ]
        if not matched:
            degree = record.degree.upper()
            matched = [
                level for pattern, level in _ABBREVIATION_PREFIXES if pattern.match(degree)
            ]
        candidates.extend(matched)
        if not candidates:
            return QualificationLevel.CLASS_XII
        return max(candidates, key=lambda level: QUALIFICATION_RANK[level])

    def _is_premier(self, record: EducationRecord) -> bool:
        if record.is_premier_institution is not None:
            return record.is_premier_institution
        if not record.institution.strip():
            return False
        institution = utils.default_process(record.institution)
        for name in self._config.premier_institutions:
            listed = utils.default_process(name)
            if " " not in listed:
                # Acronyms only match on their own.
                if institution == listed:
                    return True
            elif fuzz.ratio(listed, institution) >= self._config.premier_match_threshold:
                return True
        return False

    def _experience_spans(
        self,
        experiences: Iterable[ExperienceRecord],
        as_of: pendulum.Date,
    ) -> list[tuple[int, ExperienceRecord]]:
        # Overlapping records are summed as-is, not merged.
        spans: list[tuple[int, ExperienceRecord]] = []
        for index, record in enumerate(experiences):
            label = f"experiences[{index}]"
            if record.organization:
                label = f"{label} ({record.organization})"
            start = _as_pendulum_date(record.start_date)
            end = _as_pendulum_date(record.end_date) if record.end_date else as_of
            if start > as_of:
                raise ValidationError(
                    f"{label}: start_date {start.isoformat()} is after the reference date {as_of.isoformat()}",
                    field="start_date",
                    record=label,
                    value=record.start_date,
                )
            if end < start:
                raise ValidationError(
                    f"{label}: end_date {end.isoformat()} is before start_date {start.isoformat()}",
                    field="end_date",
                    record=label,
                    value=record.end_date,
                )
            spans.append((start.diff(end).in_days(), record))
        return spans

    def _years(self, days: Iterable[int]) -> float:
        return round(sum(days) / self._config.days_per_year, self._config.precision)

    def _resolve_reference_date(self, value: date | str | None) -> pendulum.Date:
        if value is None:
            return _as_pendulum_date(self._today_provider())
        if isinstance(value, str):
            try:
                parsed = pendulum.parse(value)
            except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
                raise ValidationError(
                    f"reference date {value!r} is not a valid date",
                    field="reference_date",
                    value=value,
                ) from exc
            return _as_pendulum_date(parsed)
        return _as_pendulum_date(value)


def _as_pendulum_date(value: Any) -> pendulum.Date:
    return pendulum.date(value.year, value.month, value.day)


def _completed_years(born: date, as_of: date) -> int:
    return as_of.year - born.year - ((as_of.month, as_of.day) < (born.month, born.day))


def derive_temporal_values(
    profile: ApplicantProfile,
    reference_date: date | str | None = None,
    *,
    config: DerivationConfig | None = None,
) -> DerivedValues:
    """Derive age, experience totals and qualification flags for ``profile``."""
    return TemporalDeriver(config=config).derive(profile, reference_date)
