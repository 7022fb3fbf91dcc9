"""Score package with registry and implementations."""

from __future__ import annotations

from typing import Optional

from . import ddimer, hestia, perc, risk, wells, years  # noqa: F401
from ...config import get_settings
from ...schemas.observations import ClinicalObservations
from ...schemas.policy import ScoringPolicy
from ...schemas.results import ScoreResults
from .registry import run_scores

__all__ = ["compute_results", "run_scores"]


def compute_results(
    observations: ClinicalObservations,
    policy: Optional[ScoringPolicy] = None,
    pack_id: Optional[str] = None,
) -> ScoreResults:
    """Recompute every score from scratch for *observations*."""

    settings = get_settings()
    policy = policy or settings.scoring_policy()
    pack_id = pack_id or settings.content_pack
    return ScoreResults(**run_scores(pack_id, observations, policy))
