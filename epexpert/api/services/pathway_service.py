"""Case operations exposed to the form front-end."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ...config import get_settings
from ...core.observations import apply_changes, new_case
from ...core.pathway import evaluate_stage, run_pathway
from ...core.scores import compute_results
from ...schemas.observations import ClinicalObservations, Subgroup
from ...schemas.policy import ScoringPolicy
from ...schemas.recommendation import PathwayOutcome, Recommendation, Stage
from ...schemas.results import ScoreResults

logger = logging.getLogger(__name__)


class PathwayService:
    """Stateless facade over the scoring core and the recommendation engine.

    Policy and content pack default to the current settings, read on every
    call so a changed environment is picked up after ``get_settings`` is
    cleared.
    """

    def __init__(
        self,
        *,
        policy: Optional[ScoringPolicy] = None,
        pack_id: Optional[str] = None,
    ) -> None:
        self._policy = policy
        self._pack_id = pack_id

    @property
    def policy(self) -> ScoringPolicy:
        return self._policy or get_settings().scoring_policy()

    @property
    def pack_id(self) -> str:
        return self._pack_id or get_settings().content_pack

    def new_case(self, subgroup: Subgroup = Subgroup.STANDARD) -> ClinicalObservations:
        return new_case(subgroup)

    def update(self, observations: ClinicalObservations, changes: Mapping[str, Any]) -> ClinicalObservations:
        return apply_changes(observations, **changes)

    def scores(self, observations: ClinicalObservations) -> ScoreResults:
        return compute_results(observations, self.policy, self.pack_id)

    def recommend(self, stage: Stage | str, observations: ClinicalObservations) -> Recommendation:
        recommendation = evaluate_stage(stage, observations, policy=self.policy, pack_id=self.pack_id)
        logger.info(
            "Stage %s evaluated: subgroup=%s outcome=%s",
            recommendation.stage.value,
            observations.subgroup.value,
            recommendation.outcome,
        )
        return recommendation

    def pathway(
        self,
        observations: ClinicalObservations,
        until: Stage | str | None = None,
    ) -> PathwayOutcome:
        outcome = run_pathway(observations, until=until, policy=self.policy, pack_id=self.pack_id)
        logger.info(
            "Pathway evaluated: subgroup=%s current_stage=%s outcomes=%s",
            observations.subgroup.value,
            outcome.current_stage.value,
            ",".join(rec.outcome for rec in outcome.recommendations),
        )
        return outcome


pathway_service = PathwayService()
