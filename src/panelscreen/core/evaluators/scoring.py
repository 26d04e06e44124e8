"""Committee evaluation scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ...errors import ValidationError
from ...schemas import EvaluationSubScores, RemunerationTier

SUB_SCORE_FIELDS: tuple[str, ...] = (
    "technical_knowledge",
    "communication_skills",
    "problem_solving",
    "organisational_alignment",
    "relevant_experience",
)

# Checked top to bottom: (tier, lower bound, lower bound inclusive).
#   total_score >  80           -> MAX
#   60 <= total_score <= 80     -> NINETY_PERCENT
#   total_score <  60           -> NOT_ELIGIBLE
REMUNERATION_TIER_TABLE: tuple[tuple[RemunerationTier, float, bool], ...] = (
    (RemunerationTier.MAX, 80.0, False),
    (RemunerationTier.NINETY_PERCENT, 60.0, True),
    (RemunerationTier.NOT_ELIGIBLE, 0.0, True),
)


@dataclass
class ScoringConfig:
    """Configuration for evaluation scoring."""

    precision: int = 1
    minimum: float = 0.0
    maximum: float = 100.0
    tier_table: tuple[tuple[RemunerationTier, float, bool], ...] = field(
        default=REMUNERATION_TIER_TABLE
    )


@dataclass(slots=True)
class EvaluationScoreResult:
    sub_scores: dict[str, float]
    total_score: float
    remuneration_tier: RemunerationTier


class EvaluationScorer:
    """Aggregate five committee sub-scores into a total and a remuneration tier."""

    def __init__(self, *, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    def score(self, sub_scores: EvaluationSubScores | dict[str, float]) -> EvaluationScoreResult:
        if isinstance(sub_scores, dict):
            sub_scores = EvaluationSubScores.model_validate(sub_scores)

        values: dict[str, float] = {}
        for name in SUB_SCORE_FIELDS:
            value = float(getattr(sub_scores, name))
            if not math.isfinite(value) or not (
                self._config.minimum <= value <= self._config.maximum
            ):
                raise ValidationError(
                    f"{name} must be between {self._config.minimum:g} and "
                    f"{self._config.maximum:g} (got {value:g})",
                    field=name,
                    value=value,
                )
            values[name] = value

        total = round(sum(values.values()) / len(values), self._config.precision)
        return EvaluationScoreResult(
            sub_scores=values,
            total_score=total,
            remuneration_tier=self.tier_for(total),
        )

    def tier_for(self, total_score: float) -> RemunerationTier:
        for tier, bound, inclusive in self._config.tier_table:
            if total_score > bound or (inclusive and total_score == bound):
                return tier
        return self._config.tier_table[-1][0]


def score_evaluation(sub_scores: EvaluationSubScores | dict[str, float]) -> EvaluationScoreResult:
    """Average five committee sub-scores and derive the remuneration tier."""
    return EvaluationScorer().score(sub_scores)
