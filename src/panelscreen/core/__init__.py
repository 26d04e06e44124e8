"""Core screening engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .derivation import DerivationConfig, DerivedValues, TemporalDeriver, derive_temporal_values
from .evaluators import (
    ContractualScreener,
    ContractualScreeningResult,
    EmpanelmentScreener,
    EmpanelmentScreeningResult,
    EvaluationScorer,
    EvaluationScoreResult,
    RemunerationBand,
    ScoringConfig,
)
from .evaluators.contractual import screen_contractual
from .evaluators.empanelment import screen_empanelment
from .evaluators.scoring import score_evaluation
from .screening import ScreeningCore

__all__ = [
    "ContractualScreener",
    "ContractualScreeningResult",
    "DerivationConfig",
    "DerivedValues",
    "EmpanelmentScreener",
    "EmpanelmentScreeningResult",
    "EvaluationScorer",
    "EvaluationScoreResult",
    "RemunerationBand",
    "ScoringConfig",
    "ScreeningCore",
    "TemporalDeriver",
    "derive_temporal_values",
    "score_evaluation",
    "screen_contractual",
    "screen_empanelment",
]
