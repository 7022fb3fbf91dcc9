"""Pathway state machine: diagnostic -> risk stratification -> treatment -> disposition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ...config import get_settings
from ...content import load_pack
from ...schemas.observations import ClinicalObservations
from ...schemas.policy import ScoringPolicy
from ...schemas.recommendation import PathwayOutcome, Recommendation, Stage
from ...schemas.results import ScoreResults
from ..scores import compute_results
from . import diagnostic, disposition, risk_stratification, treatment
from .predicates import is_low_risk, is_pe_confirmed

__all__ = [
    "STAGE_ORDER",
    "UnknownStageError",
    "evaluate_stage",
    "next_stage",
    "reachable_stages",
    "resolve_stage",
    "run_pathway",
    "stage_guard",
]

logger = logging.getLogger(__name__)

Evaluator = Callable[[ClinicalObservations, ScoreResults, Mapping[str, Any]], Recommendation]

STAGE_ORDER: Tuple[Stage, ...] = (
    Stage.DIAGNOSTIC,
    Stage.RISK_STRATIFICATION,
    Stage.TREATMENT,
    Stage.DISPOSITION,
)

_EVALUATORS: Dict[Stage, Evaluator] = {
    Stage.DIAGNOSTIC: diagnostic.evaluate,
    Stage.RISK_STRATIFICATION: risk_stratification.evaluate,
    Stage.TREATMENT: treatment.evaluate,
    Stage.DISPOSITION: disposition.evaluate,
}


@dataclass(frozen=True)
class UnknownStageError(Exception):
    stage: str

    def __str__(self) -> str:  # pragma: no cover - dataclass default
        return f"Unknown pathway stage '{self.stage}'"


def resolve_stage(stage: Stage | str) -> Stage:
    try:
        return Stage(stage)
    except ValueError:
        raise UnknownStageError(str(stage)) from None


def stage_guard(stage: Stage, observations: ClinicalObservations) -> bool:
    """Whether *stage* can be entered for these observations."""

    if stage is Stage.DIAGNOSTIC:
        return True
    if stage in (Stage.RISK_STRATIFICATION, Stage.TREATMENT):
        return is_pe_confirmed(observations)
    return is_pe_confirmed(observations) and is_low_risk(observations)


def reachable_stages(observations: ClinicalObservations) -> Tuple[Stage, ...]:
    reached = []
    for stage in STAGE_ORDER:
        if not stage_guard(stage, observations):
            break
        reached.append(stage)
    return tuple(reached)


def next_stage(stage: Stage | str, observations: ClinicalObservations) -> Optional[Stage]:
    """Stage following *stage*, or ``None`` at the end of the pathway for this case."""

    current = resolve_stage(stage)
    index = STAGE_ORDER.index(current)
    if index + 1 >= len(STAGE_ORDER):
        return None
    candidate = STAGE_ORDER[index + 1]
    if not stage_guard(candidate, observations):
        logger.debug("Pathway stops after %s: %s not reachable", current.value, candidate.value)
        return None
    return candidate


def _evaluate(
    stage: Stage,
    observations: ClinicalObservations,
    results: ScoreResults,
    pack_id: str,
) -> Recommendation:
    return _EVALUATORS[stage](observations, results, load_pack(pack_id))


def evaluate_stage(
    stage: Stage | str,
    observations: ClinicalObservations,
    *,
    policy: Optional[ScoringPolicy] = None,
    pack_id: Optional[str] = None,
) -> Recommendation:
    """Recommendation for one stage, scored from *observations* on every call."""

    current = resolve_stage(stage)
    pack_id = pack_id or get_settings().content_pack
    return _evaluate(current, observations, compute_results(observations, policy, pack_id), pack_id)


def run_pathway(
    observations: ClinicalObservations,
    *,
    until: Stage | str | None = None,
    policy: Optional[ScoringPolicy] = None,
    pack_id: Optional[str] = None,
) -> PathwayOutcome:
    """Score the case once and evaluate every reachable stage, stopping at *until*."""

    pack_id = pack_id or get_settings().content_pack
    last = resolve_stage(until) if until is not None else None
    results = compute_results(observations, policy, pack_id)
    recommendations = []
    for stage in reachable_stages(observations):
        recommendations.append(_evaluate(stage, observations, results, pack_id))
        if stage is last:
            break
    current = recommendations[-1].stage
    logger.debug("Pathway evaluated up to %s", current.value)
    return PathwayOutcome(
        observations=observations,
        results=results,
        recommendations=tuple(recommendations),
        current_stage=current,
    )
