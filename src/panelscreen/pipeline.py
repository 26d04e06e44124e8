"""Batch screening pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError as PydanticValidationError

from . import __version__
from .core import ScreeningCore
from .errors import ValidationError
from .schemas import AdvertCriteria, ApplicationRecord, Pathway


class ApplicationLoadError(ValueError):
    """Raised when application loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[ApplicationRecord]):
        super().__init__("Application loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Application loading failed: {self.errors}"


class ApplicationLoader:
    """Load application records from JSON lines."""

    def load(self, path: Path) -> list[ApplicationRecord]:
        applications: list[ApplicationRecord] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    application = ApplicationRecord.model_validate(record)
                except PydanticValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                if application.pathway is Pathway.CONTRACTUAL and not application.advert_id:
                    errors.append(f"line {idx}: contractual application without advert_id")
                    continue
                applications.append(application)
        if errors:
            raise ApplicationLoadError(errors, applications)
        return applications


class AdvertLoader:
    """Load advert criteria keyed by advert id."""

    def load(self, path: Path) -> dict[str, AdvertCriteria]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid advert JSON: {exc}") from exc
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ValueError("Advert file must contain an object or a list of objects")
        adverts = [AdvertCriteria.model_validate(item) for item in data]
        return {advert.advert_id: advert for advert in adverts}


class OutputWriter:
    """Persist screening outcomes."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default),
            encoding="utf-8",
        )


class ScreeningPipeline:
    """Screen a batch of exported applications end to end."""

    def __init__(
        self,
        *,
        core: ScreeningCore,
        application_loader: ApplicationLoader | None = None,
        advert_loader: AdvertLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._core = core
        self._applications = application_loader or ApplicationLoader()
        self._adverts = advert_loader or AdvertLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        applications_path: Path,
        output_path: Path,
        adverts_path: Path | None = None,
        reference_date: str | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        adverts = self._adverts.load(adverts_path) if adverts_path else {}
        load_errors: list[str] = []
        try:
            applications = self._applications.load(applications_path)
        except ApplicationLoadError as exc:
            applications = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("applications.partial_load", errors=exc.errors)

        serialized_results: list[dict] = []
        for application in applications:
            entry = self._screen_one(application, adverts, reference_date)
            serialized_results.append(entry)

            if audit_logger:
                audit_logger.append(
                    {
                        "application_id": application.application_id,
                        "applicant_id": application.profile.applicant_id,
                        "pathway": application.pathway.value,
                        "status": entry["status"],
                        "eligible": (entry["result"] or {}).get("eligible"),
                        "error": entry["error"],
                    }
                )

        metadata = {
            "application_count": len(applications),
            "rule_set_version": self._core.rule_set.version,
            "reference_date": reference_date,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": serialized_results})
        return serialized_results

    def _screen_one(
        self,
        application: ApplicationRecord,
        adverts: dict[str, AdvertCriteria],
        reference_date: str | None,
    ) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "application_id": application.application_id,
            "applicant_id": application.profile.applicant_id,
            "pathway": application.pathway.value,
            "status": "screened",
            "result": None,
            "error": None,
        }
        try:
            if application.pathway is Pathway.EMPANELMENT:
                result = self._core.screen_empanelment(application.profile, reference_date)
            else:
                advert = adverts.get(application.advert_id or "")
                if advert is None:
                    raise ValidationError(
                        f"unknown advert_id {application.advert_id!r}",
                        field="advert_id",
                        record=application.application_id,
                        value=application.advert_id,
                    )
                result = self._core.screen_contractual(application.profile, advert, reference_date)
        except ValidationError as exc:
            self._logger.warning(
                "screening.rejected_input",
                application_id=application.application_id,
                error=str(exc),
            )
            entry["status"] = "invalid"
            entry["error"] = str(exc)
            return entry

        entry["result"] = json.loads(json.dumps(asdict(result), default=_json_default))
        return entry


def _json_default(value: Any) -> Any:
    if isinstance(value, pendulum.DateTime):
        return value.to_iso8601_string()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, default=_json_default))
            handle.write("\n")
