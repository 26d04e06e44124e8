"""Evaluator implementations for the screening core."""

from .contractual import ContractualScreener, ContractualScreeningResult, RemunerationBand
from .empanelment import EmpanelmentScreener, EmpanelmentScreeningResult
from .scoring import EvaluationScorer, EvaluationScoreResult, ScoringConfig

__all__ = [
    "ContractualScreener",
    "ContractualScreeningResult",
    "EmpanelmentScreener",
    "EmpanelmentScreeningResult",
    "EvaluationScorer",
    "EvaluationScoreResult",
    "RemunerationBand",
    "ScoringConfig",
]
