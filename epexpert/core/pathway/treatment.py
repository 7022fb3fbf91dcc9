"""Treatment stage: tier guidance, anticoagulant choice and therapy duration."""

from __future__ import annotations

from typing import Any, List, Mapping

from ...schemas.observations import ClinicalObservations, Provocation, RenalFunction
from ...schemas.recommendation import Recommendation, Stage
from ...schemas.results import ScoreResults
from .predicates import RiskTier, has_active_cancer, is_pe_confirmed, risk_tier
from .texts import build

STAGE = Stage.TREATMENT

_TIER_AGENTS = {
    RiskTier.HIGH: "ufh_reperfusion",
    RiskTier.INTERMEDIATE_HIGH: "parenteral_then_doac",
    RiskTier.INTERMEDIATE_LOW: "parenteral_then_doac",
    RiskTier.LOW: "doac_first_line",
}


def select_agent(observations: ClinicalObservations, tier: RiskTier) -> str:
    """Severe renal impairment beats pregnancy, which beats cancer, which beats the tier."""

    if observations.renal_function is RenalFunction.SEVERE:
        return "renal_severe"
    if observations.is_pregnant:
        return "pregnant"
    if has_active_cancer(observations):
        return "active_cancer"
    return _TIER_AGENTS[tier]


def select_duration(observations: ClinicalObservations) -> str:
    if observations.is_pregnant:
        return "pregnant"
    if has_active_cancer(observations):
        return "active_cancer"
    if observations.provocation is Provocation.TRANSIENT:
        return "transient"
    if observations.provocation is Provocation.UNPROVOKED:
        return "unprovoked_recurrent" if observations.recurrent_episode else "unprovoked_first"
    return "unset"


def evaluate(
    observations: ClinicalObservations,
    results: ScoreResults,
    pack: Mapping[str, Any],
) -> Recommendation:
    section = pack["treatment"]
    if not is_pe_confirmed(observations):
        return build(STAGE, section["pe_not_confirmed"])

    tier = risk_tier(observations)
    tier_entry = section["tiers"][tier.value]
    notes: List[str] = [section["agents"][select_agent(observations, tier)]]
    notes.extend(tier_entry.get("notes", []))
    if tier is RiskTier.HIGH and observations.bleeding_risk:
        notes.append(section["bleeding_note"])
    notes.append(section["durations"][select_duration(observations)])
    notes.append(section["duration_note"])
    return build(STAGE, {"outcome": tier.value, **tier_entry}, notes=notes)
