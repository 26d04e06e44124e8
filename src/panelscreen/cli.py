"""Typer CLI entrypoint for batch screening and committee scoring."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
import yaml

from .container import create_container
from .errors import ConfigurationError, ValidationError
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Applicant eligibility screening CLI.")


def _load_settings(config: Optional[Path]) -> tuple[dict[str, Any], str | None]:
    if not config:
        return {}, None
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    app_config = load_config(loaded)
    return app_config.to_settings(), app_config.log_level


@app.command()
def screen(
    applications: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applications JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    adverts: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Adverts JSON path."),
    as_of: Optional[str] = typer.Option(None, help="Reference date (ISO) for age and experience calculations."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Screen exported applications against their pathway rules."""
    settings, configured_level = _load_settings(config)
    configure_logging(log_level or configured_level or "INFO")

    container = create_container(settings=settings)
    try:
        pipeline = container.pipeline()
    except ConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    audit_logger = AuditLogger(audit_log) if audit_log else None
    results = pipeline.run(
        applications_path=applications,
        adverts_path=adverts,
        output_path=output,
        reference_date=as_of,
        audit_logger=audit_logger,
    )
    typer.echo(f"Screened {len(results)} applications. Results saved to {output}.")


@app.command()
def score(
    technical_knowledge: float = typer.Option(..., help="Technical knowledge (0-100)."),
    communication_skills: float = typer.Option(..., help="Communication skills (0-100)."),
    problem_solving: float = typer.Option(..., help="Problem solving (0-100)."),
    organisational_alignment: float = typer.Option(..., help="Organisational alignment (0-100)."),
    relevant_experience: float = typer.Option(..., help="Relevant experience (0-100)."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Aggregate committee sub-scores and print the remuneration tier."""
    settings, configured_level = _load_settings(config)
    configure_logging(log_level or configured_level or "WARNING")
    core = create_container(settings=settings).screening_core()
    try:
        result = core.score(
            {
                "technical_knowledge": technical_knowledge,
                "communication_skills": communication_skills,
                "problem_solving": problem_solving,
                "organisational_alignment": organisational_alignment,
                "relevant_experience": relevant_experience,
            }
        )
    except ValidationError as exc:
        typer.echo(f"Invalid score: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    payload = asdict(result)
    payload["remuneration_tier"] = result.remuneration_tier.value
    typer.echo(json.dumps(payload))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
