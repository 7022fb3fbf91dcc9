"""Request and response bodies of the EP-Expert HTTP interface."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ...schemas.observations import ClinicalObservations, Subgroup
from ...schemas.recommendation import Stage
from ...schemas.results import ScoreResults


class NewCaseRequest(BaseModel):
    subgroup: Subgroup = Subgroup.STANDARD


class ObservationUpdateRequest(BaseModel):
    observations: ClinicalObservations
    changes: Dict[str, Any] = Field(default_factory=dict)


class ObservationsResponse(BaseModel):
    observations: ClinicalObservations
    locked_fields: List[str]


class ScoresResponse(BaseModel):
    results: ScoreResults
    ddimer_threshold_display: str


class PathwayRequest(BaseModel):
    observations: ClinicalObservations
    until: Optional[Stage] = None


class ReportResponse(BaseModel):
    summary: Dict[str, Any]
    text: str


__all__ = [
    "NewCaseRequest",
    "ObservationUpdateRequest",
    "ObservationsResponse",
    "PathwayRequest",
    "ReportResponse",
    "ScoresResponse",
]
