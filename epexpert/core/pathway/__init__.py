"""Recommendation engine: stage evaluators and the pathway state machine."""

from .engine import (
    STAGE_ORDER,
    UnknownStageError,
    evaluate_stage,
    next_stage,
    reachable_stages,
    resolve_stage,
    run_pathway,
    stage_guard,
)
from .predicates import RiskTier, risk_tier

__all__ = [
    "RiskTier",
    "STAGE_ORDER",
    "UnknownStageError",
    "evaluate_stage",
    "next_stage",
    "reachable_stages",
    "resolve_stage",
    "risk_tier",
    "run_pathway",
    "stage_guard",
]
