"""Named entry guards for the pathway stages.

Kept free of any text so the risk tiering and the D-dimer reading can be
checked on their own.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ...schemas.observations import ClinicalObservations, Subgroup, TriState
from ...schemas.results import ScoreResults, WellsCategory
from ..normalizer.units import ddimer_to_mg_per_l

__all__ = [
    "RiskTier",
    "ddimer_mg_per_l",
    "ddimer_positive",
    "has_active_cancer",
    "has_positive_biomarkers",
    "is_hemodynamically_unstable",
    "is_high_risk",
    "is_intermediate_high_risk",
    "is_intermediate_low_risk",
    "is_low_risk",
    "is_pe_confirmed",
    "perc_rules_out",
    "risk_tier",
]


class RiskTier(str, Enum):
    HIGH = "high"
    INTERMEDIATE_HIGH = "intermediate_high"
    INTERMEDIATE_LOW = "intermediate_low"
    LOW = "low"


def is_hemodynamically_unstable(observations: ClinicalObservations) -> bool:
    return observations.hemodynamically_unstable or (
        observations.sbp is not None and observations.sbp < 90
    )


def has_positive_biomarkers(observations: ClinicalObservations) -> bool:
    return observations.troponin or observations.bnp


def is_high_risk(observations: ClinicalObservations) -> bool:
    return is_hemodynamically_unstable(observations)


def is_intermediate_high_risk(observations: ClinicalObservations) -> bool:
    """Stable, with RV dysfunction AND a positive biomarker."""

    return (
        not is_hemodynamically_unstable(observations)
        and observations.rv_dysfunction
        and has_positive_biomarkers(observations)
    )


def is_intermediate_low_risk(observations: ClinicalObservations) -> bool:
    """Stable, with exactly one of RV dysfunction or a positive biomarker."""

    if is_hemodynamically_unstable(observations):
        return False
    return observations.rv_dysfunction != has_positive_biomarkers(observations)


def is_low_risk(observations: ClinicalObservations) -> bool:
    return not (
        is_hemodynamically_unstable(observations)
        or observations.rv_dysfunction
        or has_positive_biomarkers(observations)
    )


def risk_tier(observations: ClinicalObservations) -> RiskTier:
    if is_high_risk(observations):
        return RiskTier.HIGH
    if is_intermediate_high_risk(observations):
        return RiskTier.INTERMEDIATE_HIGH
    if is_intermediate_low_risk(observations):
        return RiskTier.INTERMEDIATE_LOW
    return RiskTier.LOW


def is_pe_confirmed(observations: ClinicalObservations) -> bool:
    return observations.pe_confirmed or observations.ctpa_result is TriState.POSITIVE


def has_active_cancer(observations: ClinicalObservations) -> bool:
    return observations.subgroup is Subgroup.ACTIVE_CANCER or observations.malignancy


def perc_rules_out(observations: ClinicalObservations, results: ScoreResults) -> bool:
    """Low Wells, standard patient and no PERC criterion: PE excluded clinically."""

    return (
        observations.subgroup is Subgroup.STANDARD
        and results.wells_category is WellsCategory.LOW
        and not results.perc_positive
    )


def ddimer_mg_per_l(observations: ClinicalObservations) -> Optional[float]:
    if observations.ddimer is None:
        return None
    return ddimer_to_mg_per_l(observations.ddimer, observations.ddimer_unit)


def ddimer_positive(observations: ClinicalObservations, results: ScoreResults) -> Optional[bool]:
    """``None`` when no D-dimer was entered, else value >= threshold (both in mg/L)."""

    value = ddimer_mg_per_l(observations)
    if value is None:
        return None
    return value >= results.ddimer_threshold
