"""Coarse PE severity classification (high / intermediate / low)."""

from __future__ import annotations

from typing import Optional

from ...schemas.observations import ClinicalObservations
from ...schemas.results import RiskLevel
from .registry import ScoreContext, register


def classify_risk(
    hemodynamically_unstable: bool,
    sbp: Optional[float],
    rv_dysfunction: bool,
    troponin: bool,
    bnp: bool,
) -> RiskLevel:
    """First match wins: instability, then any of RV dysfunction/troponin/BNP."""

    if hemodynamically_unstable or (sbp is not None and sbp < 90):
        return RiskLevel.HIGH
    if rv_dysfunction or troponin or bnp:
        return RiskLevel.INTERMEDIATE
    return RiskLevel.LOW


@register("risk")
def compute(observations: ClinicalObservations, context: ScoreContext) -> dict[str, object]:
    level = classify_risk(
        observations.hemodynamically_unstable,
        observations.sbp,
        observations.rv_dysfunction,
        observations.troponin,
        observations.bnp,
    )
    return {"risk_level": level}
