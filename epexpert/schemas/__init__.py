"""Pydantic contracts shared by the scoring core and the API."""

from .observations import (
    ClinicalObservations,
    CtpaFindings,
    DdimerUnit,
    Gender,
    Provocation,
    RenalFunction,
    Subgroup,
    TriState,
)
from .policy import HestiaHemodynamicPolicy, HighWellsDdimerPolicy, ScoringPolicy
from .recommendation import PathwayOutcome, Recommendation, Severity, Stage
from .results import RiskLevel, ScoreResults, WellsCategory

__all__ = [
    "ClinicalObservations",
    "CtpaFindings",
    "DdimerUnit",
    "Gender",
    "HestiaHemodynamicPolicy",
    "HighWellsDdimerPolicy",
    "PathwayOutcome",
    "Provocation",
    "Recommendation",
    "RenalFunction",
    "RiskLevel",
    "ScoreResults",
    "ScoringPolicy",
    "Severity",
    "Stage",
    "Subgroup",
    "TriState",
    "WellsCategory",
]
