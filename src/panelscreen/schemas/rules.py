"""Rule-set schema for the empanelment ladder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import EmpanelmentCategory

_NUMERIC_THRESHOLDS = (
    "min_total_experience_years",
    "max_total_experience_years",
    "min_senior_grade_service_years",
    "min_advanced_pay_level_years",
    "max_age",
)


class EligibilityRule(BaseModel):
    """One route into a tier. Unset thresholds are not evaluated."""

    name: str
    description: str | None = None
    min_total_experience_years: float | None = None
    max_total_experience_years: float | None = None
    min_senior_grade_service_years: float | None = None
    min_advanced_pay_level_years: float | None = None
    max_age: int | None = None
    requires_doctorate: bool | None = None
    requires_postgraduate: bool | None = None
    requires_premier_degree: bool | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    def problems(self) -> list[str]:
        found: list[str] = []
        for name in _NUMERIC_THRESHOLDS:
            value = getattr(self, name)
            if value is not None and value < 0:
                found.append(f"route {self.name!r}: {name} must not be negative (got {value})")
        low = self.min_total_experience_years
        high = self.max_total_experience_years
        if low is not None and high is not None and low > high:
            found.append(
                f"route {self.name!r}: min_total_experience_years {low} exceeds "
                f"max_total_experience_years {high}"
            )
        return found


class CategoryRule(BaseModel):
    """A ladder tier with its routes in precedence order."""

    category: str
    label: str | None = None
    routes: list[EligibilityRule] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def display_name(self) -> str:
        return self.label or self.category.replace("_", " ").title()


class EmpanelmentRuleSet(BaseModel):
    """Versioned ladder of categories, most senior first."""

    version: str
    categories: list[CategoryRule]
    required_categories: list[str] = Field(
        default_factory=lambda: [category.value for category in EmpanelmentCategory]
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    def problems(self) -> list[str]:
        """Return integrity problems; an empty list means the set is usable."""
        found: list[str] = []
        seen: set[str] = set()
        for tier in self.categories:
            if tier.category in seen:
                found.append(f"category {tier.category!r} is declared more than once")
            seen.add(tier.category)
            if not tier.routes:
                found.append(f"category {tier.category!r} has no routes")
            for route in tier.routes:
                found.extend(f"category {tier.category!r} {problem}" for problem in route.problems())
        for required in self.required_categories:
            if required not in seen:
                found.append(f"required category {required!r} is missing")
        return found
