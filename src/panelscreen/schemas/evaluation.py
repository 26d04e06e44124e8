from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EvaluationSubScores(BaseModel):
    """Committee-assigned sub-scores, each expected in [0, 100]."""

    technical_knowledge: float
    communication_skills: float
    problem_solving: float
    organisational_alignment: float
    relevant_experience: float

    model_config = ConfigDict(extra="forbid", frozen=True)
