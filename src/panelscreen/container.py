"""Dependency injection container for the screening engine."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .config import ConfigManager, load_rule_set
from .core import (
    ContractualScreener,
    DerivationConfig,
    EmpanelmentScreener,
    EvaluationScorer,
    ScoringConfig,
    ScreeningCore,
    TemporalDeriver,
)
from .pipeline import ScreeningPipeline


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config_manager = providers.Singleton(ConfigManager)

    rule_set = providers.Singleton(load_rule_set)

    deriver = providers.Singleton(TemporalDeriver)
    empanelment_screener = providers.Singleton(EmpanelmentScreener)
    contractual_screener = providers.Singleton(ContractualScreener)
    scorer = providers.Singleton(EvaluationScorer)

    screening_core = providers.Singleton(
        ScreeningCore,
        rule_set=rule_set,
        deriver=deriver,
        empanelment=empanelment_screener,
        contractual=contractual_screener,
        scorer=scorer,
    )

    pipeline = providers.Factory(
        ScreeningPipeline,
        core=screening_core,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> ScreeningContainer:
    """Instantiate container with optional overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    derivation_settings = dict(settings.get("derivation") or {})
    if derivation_settings:
        if "premier_institutions" in derivation_settings:
            derivation_settings["premier_institutions"] = tuple(
                derivation_settings["premier_institutions"]
            )
        derivation_config = DerivationConfig(**derivation_settings)
        container.deriver.override(
            providers.Singleton(TemporalDeriver, config=derivation_config)
        )

    empanelment_settings = settings.get("empanelment") or {}
    if "rule_set_path" in empanelment_settings:
        container.rule_set.override(
            providers.Singleton(load_rule_set, empanelment_settings["rule_set_path"])
        )
    elif "rule_set" in empanelment_settings:
        container.rule_set.override(
            providers.Singleton(
                container.config_manager().load_rule_set,
                empanelment_settings["rule_set"],
            )
        )

    scoring_settings = settings.get("scoring") or {}
    if scoring_settings:
        scoring_config = ScoringConfig(**scoring_settings)
        container.scorer.override(
            providers.Singleton(EvaluationScorer, config=scoring_config)
        )

    return container
