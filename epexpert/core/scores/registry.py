"""Score registry composing the calculators listed in a content pack."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping

from ...content import load_pack
from ...schemas.observations import ClinicalObservations
from ...schemas.policy import ScoringPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreContext:
    """What a calculator may read besides the observations.

    ``partial`` holds the fields produced by the calculators that ran before
    it, in pack order (the D-dimer threshold reads the Wells and YEARS
    results from there).
    """

    policy: ScoringPolicy
    pack: Mapping[str, Any]
    partial: Mapping[str, Any] = field(default_factory=dict)

    def label(self, group: str, key: str, **values: Any) -> str:
        template = self.pack.get("labels", {}).get(group, {}).get(key, "")
        return template.format(**values) if values else template


ScoreFunc = Callable[[ClinicalObservations, ScoreContext], Dict[str, Any]]

_REGISTRY: Dict[str, ScoreFunc] = {}


def register(name: str) -> Callable[[ScoreFunc], ScoreFunc]:
    def decorator(func: ScoreFunc) -> ScoreFunc:
        _REGISTRY[name] = func
        return func

    return decorator


def registered() -> tuple[str, ...]:
    return tuple(_REGISTRY)


def run_scores(
    pack_id: str,
    observations: ClinicalObservations,
    policy: ScoringPolicy,
) -> Dict[str, Any]:
    pack = load_pack(pack_id)
    requested = [score.get("name") for score in pack.get("scores", [])]
    context = ScoreContext(policy=policy, pack=pack)
    results: Dict[str, Any] = {}
    for score_name in requested:
        func = _REGISTRY.get(score_name)
        if not func:
            logger.warning("Score %r listed in pack %r is not registered", score_name, pack_id)
            continue
        results.update(func(observations, replace(context, partial=dict(results))))
    return results
