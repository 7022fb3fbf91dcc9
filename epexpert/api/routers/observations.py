"""Endpoints driving the observation form."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ...core.observations import ObservationUpdateError, locked_fields
from ...schemas.observations import ClinicalObservations
from ..schemas.pathway import NewCaseRequest, ObservationsResponse, ObservationUpdateRequest
from ..services.pathway_service import pathway_service

router = APIRouter(prefix="/api/observations", tags=["observations"])


def _response(observations: ClinicalObservations) -> ObservationsResponse:
    return ObservationsResponse(
        observations=observations,
        locked_fields=sorted(locked_fields(observations)),
    )


@router.post("/new", response_model=ObservationsResponse)
async def new_case(payload: Optional[NewCaseRequest] = None) -> ObservationsResponse:
    payload = payload or NewCaseRequest()
    return _response(pathway_service.new_case(payload.subgroup))


@router.post("/update", response_model=ObservationsResponse)
async def update_observations(payload: ObservationUpdateRequest) -> ObservationsResponse:
    try:
        updated = pathway_service.update(payload.observations, payload.changes)
    except ObservationUpdateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _response(updated)
