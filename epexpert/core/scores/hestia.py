"""Hestia criteria: contraindications to outpatient management."""

from __future__ import annotations

from typing import Dict, Optional

from ...schemas.observations import ClinicalObservations, RenalFunction
from ...schemas.policy import HestiaHemodynamicPolicy, ScoringPolicy
from .registry import ScoreContext, register


def hemodynamic_criterion(observations: ClinicalObservations, policy: ScoringPolicy) -> bool:
    if observations.hemodynamically_unstable:
        return True
    if policy.hestia_hemodynamic is HestiaHemodynamicPolicy.FLAG_ONLY:
        return False
    low_sbp = observations.sbp is not None and observations.sbp < 100
    tachycardia = observations.heart_rate is not None and observations.heart_rate > 100
    return low_sbp or tachycardia


def hestia_criteria(
    observations: ClinicalObservations,
    policy: Optional[ScoringPolicy] = None,
) -> Dict[str, bool]:
    """The eleven criteria by name, in checklist order."""

    policy = policy or ScoringPolicy()
    saturation = observations.oxygen_saturation
    return {
        "hemodynamically_unstable": hemodynamic_criterion(observations, policy),
        "thrombolysis_needed": observations.thrombolysis_needed,
        "active_bleeding": observations.active_bleeding,
        "oxygen_needed": observations.oxygen_needed or (saturation is not None and saturation < 90),
        "pe_on_anticoag": observations.pe_on_anticoag,
        "severe_pain": observations.severe_pain,
        "social_reasons": observations.social_reasons,
        "renal_impairment": observations.renal_impairment or observations.renal_function is RenalFunction.SEVERE,
        "liver_impairment": observations.liver_impairment,
        "pregnancy": observations.pregnant_hestia or observations.is_pregnant,
        "hit_history": observations.hit_history,
    }


def hestia_score(observations: ClinicalObservations, policy: Optional[ScoringPolicy] = None) -> int:
    return sum(1 for met in hestia_criteria(observations, policy).values() if met)


@register("hestia")
def compute(observations: ClinicalObservations, context: ScoreContext) -> dict[str, object]:
    return {"hestia_score": hestia_score(observations, context.policy)}
