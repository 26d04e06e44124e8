"""Empanelment ladder screening."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...errors import ConfigurationError
from ...schemas import CategoryRule, EligibilityRule, EmpanelmentRuleSet
from ..derivation import DerivedValues

# (rule threshold, derived attribute)
_MINIMUM_CHECKS: tuple[tuple[str, str], ...] = (
    ("min_total_experience_years", "total_experience_years"),
    ("min_senior_grade_service_years", "senior_grade_service_years"),
    ("min_advanced_pay_level_years", "advanced_pay_level_years"),
)
_MAXIMUM_CHECKS: tuple[tuple[str, str], ...] = (
    ("max_total_experience_years", "total_experience_years"),
    ("max_age", "age"),
)
_FLAG_CHECKS: tuple[tuple[str, str], ...] = (
    ("requires_doctorate", "has_doctorate"),
    ("requires_postgraduate", "has_postgraduate"),
    ("requires_premier_degree", "has_premier_degree"),
)


@dataclass(slots=True)
class RouteOutcome:
    """Result of checking one route of a tier."""

    route: str
    passed: bool
    satisfied: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)


@dataclass(slots=True)
class TierOutcome:
    category: str
    label: str
    routes: list[RouteOutcome]

    @property
    def matched_route(self) -> RouteOutcome | None:
        return next((route for route in self.routes if route.passed), None)

    @property
    def qualified(self) -> bool:
        return self.matched_route is not None

    def reason(self) -> str:
        matched = self.matched_route
        if matched is not None:
            detail = ", ".join(matched.satisfied) or "no constraints"
            return f"{self.label}: qualified via {matched.route} route ({detail})"
        failed = "; ".join(
            f"{route.route} route failed ({', '.join(route.failures)})" for route in self.routes
        )
        return f"{self.label}: {failed}"


@dataclass(slots=True)
class EmpanelmentScreeningResult:
    """Screening verdict for the empanelment pathway."""

    eligible: bool
    provisional_category: str | None
    qualified_categories: list[str]
    reasons: list[str]
    derived: DerivedValues
    matched_routes: dict[str, str]
    rule_set_version: str


class EmpanelmentScreener:
    """Evaluate derived values against every tier of an empanelment rule set."""

    def screen(
        self,
        derived: DerivedValues,
        rule_set: EmpanelmentRuleSet,
    ) -> EmpanelmentScreeningResult:
        problems = rule_set.problems()
        if problems:
            raise ConfigurationError(
                f"Empanelment rule set {rule_set.version!r} is invalid",
                errors=problems,
            )

        outcomes = [self._evaluate_tier(tier, derived) for tier in rule_set.categories]
        qualified = [outcome for outcome in outcomes if outcome.qualified]

        reasons = [outcome.reason() for outcome in outcomes]
        if qualified:
            reasons.append(f"Provisional category: {qualified[0].label}")
        else:
            reasons.append("No empanelment category matched")

        return EmpanelmentScreeningResult(
            eligible=bool(qualified),
            provisional_category=qualified[0].category if qualified else None,
            qualified_categories=[outcome.category for outcome in qualified],
            reasons=reasons,
            derived=derived,
            matched_routes={
                outcome.category: outcome.matched_route.route  # type: ignore[union-attr]
                for outcome in qualified
            },
            rule_set_version=rule_set.version,
        )

    def _evaluate_tier(self, tier: CategoryRule, derived: DerivedValues) -> TierOutcome:
        return TierOutcome(
            category=tier.category,
            label=tier.display_name,
            routes=[self._evaluate_route(route, derived) for route in tier.routes],
        )

    @staticmethod
    def _evaluate_route(route: EligibilityRule, derived: DerivedValues) -> RouteOutcome:
        satisfied: list[str] = []
        failures: list[str] = []

        for threshold_name, attribute in _MINIMUM_CHECKS:
            required = getattr(route, threshold_name)
            if required is None:
                continue
            actual = getattr(derived, attribute)
            if actual >= required:
                satisfied.append(f"{attribute} {_fmt(actual)} >= {required:g}")
            else:
                failures.append(f"{attribute} {_fmt(actual)} < required {required:g}")

        for threshold_name, attribute in _MAXIMUM_CHECKS:
            allowed = getattr(route, threshold_name)
            if allowed is None:
                continue
            actual = getattr(derived, attribute)
            if actual <= allowed:
                satisfied.append(f"{attribute} {_fmt(actual)} <= {allowed:g}")
            else:
                failures.append(f"{attribute} {_fmt(actual)} > allowed {allowed:g}")

        for requirement, attribute in _FLAG_CHECKS:
            if not getattr(route, requirement):
                continue
            if getattr(derived, attribute):
                satisfied.append(attribute)
            else:
                failures.append(f"{attribute} required")

        return RouteOutcome(
            route=route.name,
            passed=not failures,
            satisfied=satisfied,
            failures=failures,
        )


def _fmt(value: float | int) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.1f}"


def screen_empanelment(
    derived: DerivedValues,
    rule_set: EmpanelmentRuleSet,
) -> EmpanelmentScreeningResult:
    """Screen ``derived`` against every tier of ``rule_set``."""
    return EmpanelmentScreener().screen(derived, rule_set)
