"""Recommendation contract produced by each pathway stage."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Tuple

from .common import StrictModel
from .observations import ClinicalObservations
from .results import ScoreResults

__all__ = ["PathwayOutcome", "Recommendation", "Severity", "Stage"]

Severity = Literal["", "info", "success", "warning", "error"]


class Stage(str, Enum):
    DIAGNOSTIC = "diagnostic"
    RISK_STRATIFICATION = "risk_stratification"
    TREATMENT = "treatment"
    DISPOSITION = "disposition"


class Recommendation(StrictModel):
    stage: Stage
    outcome: str
    text: str
    next_step: str = ""
    severity: Severity = ""
    notes: Tuple[str, ...] = ()
    determinable: bool = True


class PathwayOutcome(StrictModel):
    """Scores plus the recommendation of every stage reached, in pathway order."""

    observations: ClinicalObservations
    results: ScoreResults
    recommendations: Tuple[Recommendation, ...]
    current_stage: Stage
