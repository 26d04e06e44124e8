"""Screening core orchestration."""

from __future__ import annotations

from datetime import date

import structlog

from ..schemas import AdvertCriteria, ApplicantProfile, EmpanelmentRuleSet, EvaluationSubScores
from .derivation import TemporalDeriver
from .evaluators import (
    ContractualScreener,
    ContractualScreeningResult,
    EmpanelmentScreener,
    EmpanelmentScreeningResult,
    EvaluationScorer,
    EvaluationScoreResult,
)


class ScreeningCore:
    """Route a profile through derivation and the pathway's screening engine."""

    def __init__(
        self,
        *,
        rule_set: EmpanelmentRuleSet,
        deriver: TemporalDeriver | None = None,
        empanelment: EmpanelmentScreener | None = None,
        contractual: ContractualScreener | None = None,
        scorer: EvaluationScorer | None = None,
    ) -> None:
        self._rule_set = rule_set
        self._deriver = deriver or TemporalDeriver()
        self._empanelment = empanelment or EmpanelmentScreener()
        self._contractual = contractual or ContractualScreener()
        self._scorer = scorer or EvaluationScorer()
        self._logger = structlog.get_logger(__name__)

    @property
    def rule_set(self) -> EmpanelmentRuleSet:
        return self._rule_set

    def screen_empanelment(
        self,
        profile: ApplicantProfile,
        reference_date: date | str | None = None,
    ) -> EmpanelmentScreeningResult:
        derived = self._deriver.derive(profile, reference_date)
        result = self._empanelment.screen(derived, self._rule_set)
        self._logger.info(
            "screening.empanelment",
            applicant_id=profile.applicant_id,
            rule_set_version=result.rule_set_version,
            eligible=result.eligible,
            provisional_category=result.provisional_category,
            qualified_categories=result.qualified_categories,
        )
        return result

    def screen_contractual(
        self,
        profile: ApplicantProfile,
        advert: AdvertCriteria,
        reference_date: date | str | None = None,
    ) -> ContractualScreeningResult:
        derived = self._deriver.derive(profile, reference_date)
        result = self._contractual.screen(derived, advert)
        self._logger.info(
            "screening.contractual",
            applicant_id=profile.applicant_id,
            advert_id=advert.advert_id,
            eligible=result.eligible,
            meets_qualification=result.meets_qualification,
            meets_experience=result.meets_experience,
            meets_age=result.meets_age,
        )
        return result

    def score(self, sub_scores: EvaluationSubScores | dict[str, float]) -> EvaluationScoreResult:
        result = self._scorer.score(sub_scores)
        self._logger.info(
            "evaluation.scored",
            total_score=result.total_score,
            remuneration_tier=result.remuneration_tier.value,
        )
        return result
