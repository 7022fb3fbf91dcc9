"""Endpoints for scores, stage recommendations and case reports."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ...core.normalizer.units import format_ddimer
from ...core.pathway import UnknownStageError
from ...schemas.observations import ClinicalObservations
from ...schemas.recommendation import PathwayOutcome, Recommendation
from ..schemas.pathway import PathwayRequest, ReportResponse, ScoresResponse
from ..services.pathway_service import pathway_service
from ..services.report_service import report_service

router = APIRouter(prefix="/api", tags=["pathway"])


@router.post("/scores", response_model=ScoresResponse)
async def compute_scores(observations: ClinicalObservations) -> ScoresResponse:
    results = pathway_service.scores(observations)
    unit = observations.ddimer_unit.value
    return ScoresResponse(
        results=results,
        ddimer_threshold_display=f"{format_ddimer(results.ddimer_threshold, unit)} {unit}",
    )


@router.post("/recommendations/{stage}", response_model=Recommendation)
async def recommend(stage: str, observations: ClinicalObservations) -> Recommendation:
    try:
        return pathway_service.recommend(stage, observations)
    except UnknownStageError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/pathway", response_model=PathwayOutcome)
async def pathway(payload: PathwayRequest) -> PathwayOutcome:
    return pathway_service.pathway(payload.observations, payload.until)


@router.post("/report", response_model=ReportResponse)
async def report(payload: PathwayRequest) -> ReportResponse:
    summary, text = report_service.build(payload.observations, payload.until)
    return ReportResponse(summary=summary, text=text)
