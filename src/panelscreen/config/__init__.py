"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError
from ..schemas import EmpanelmentRuleSet

BUNDLED_CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_RULE_SET = "empanelment_default"


class ConfigManager:
    """YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path | None = None):
        self._base_path = Path(base_path) if base_path else BUNDLED_CONFIG_DIR

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        return load_yaml(self._base_path / f"{name}.yaml")

    def load_rule_set(self, name: str = DEFAULT_RULE_SET) -> EmpanelmentRuleSet:
        return parse_rule_set(self.load(name), source=name)


def load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration {path} must be a YAML mapping")
    return data


def parse_rule_set(raw: dict[str, Any], *, source: str = "<memory>") -> EmpanelmentRuleSet:
    """Validate a raw mapping into a rule set, raising ConfigurationError on any defect."""
    try:
        rule_set = EmpanelmentRuleSet.model_validate(raw)
    except PydanticValidationError as exc:
        raise ConfigurationError(
            f"Rule set {source!r} is malformed",
            errors=[f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()],
        ) from exc
    problems = rule_set.problems()
    if problems:
        raise ConfigurationError(f"Rule set {source!r} is invalid", errors=problems)
    return rule_set


def load_rule_set(path: str | Path | None = None) -> EmpanelmentRuleSet:
    """Load a rule set from ``path`` or the bundled default ladder."""
    if path is None:
        return ConfigManager().load_rule_set()
    path = Path(path)
    return parse_rule_set(load_yaml(path), source=str(path))


__all__ = [
    "ConfigManager",
    "DEFAULT_RULE_SET",
    "load_rule_set",
    "load_yaml",
    "parse_rule_set",
]
