"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ConfigurationError


class DerivationSettings(BaseModel):
    days_per_year: float | None = None
    precision: int | None = None
    premier_institutions: list[str] | None = None
    premier_match_threshold: float | None = None

    model_config = ConfigDict(extra="forbid")


class EmpanelmentSettings(BaseModel):
    rule_set: str | None = None
    rule_set_path: str | None = None

    model_config = ConfigDict(extra="forbid")


class ScoringSettings(BaseModel):
    precision: int | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    derivation: DerivationSettings = Field(default_factory=DerivationSettings)
    empanelment: EmpanelmentSettings = Field(default_factory=EmpanelmentSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    log_level: str | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section in ("derivation", "empanelment", "scoring"):
            values = getattr(self, section).model_dump(exclude_none=True)
            if values:
                settings[section] = values
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ConfigurationError("Config must be a mapping")
    return AppConfig.model_validate(raw)
