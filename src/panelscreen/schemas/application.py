from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import Pathway
from .profile import ApplicantProfile


class ApplicationRecord(BaseModel):
    """One submitted application as exported by the application store."""

    application_id: str
    pathway: Pathway
    profile: ApplicantProfile
    advert_id: str | None = None

    model_config = ConfigDict(extra="forbid")
