"""Wells score for pulmonary embolism."""

from __future__ import annotations

from ...schemas.observations import ClinicalObservations, Subgroup
from ...schemas.results import WellsCategory
from .registry import ScoreContext, register


def wells_score(observations: ClinicalObservations) -> float:
    score = 0.0
    if observations.clinical_dvt:
        score += 3
    if observations.pe_most_likely:
        score += 3
    if observations.heart_rate is not None and observations.heart_rate > 100:
        score += 1.5
    if observations.immobilization:
        score += 1.5
    if observations.previous_vte:
        score += 1.5
    if observations.hemoptysis:
        score += 1
    if observations.malignancy:
        score += 1
    return score


def wells_category(score: float, subgroup: Subgroup) -> WellsCategory:
    """Three bands, except in active cancer where the bands are <=4 and >=5."""

    if subgroup is Subgroup.ACTIVE_CANCER:
        return WellsCategory.LOW_MODERATE if score <= 4 else WellsCategory.HIGH
    if score <= 1:
        return WellsCategory.LOW
    if score <= 6:
        return WellsCategory.MODERATE
    return WellsCategory.HIGH


@register("wells")
def compute(observations: ClinicalObservations, context: ScoreContext) -> dict[str, object]:
    score = wells_score(observations)
    category = wells_category(score, observations.subgroup)
    label_key = category.value
    if observations.subgroup is Subgroup.ACTIVE_CANCER and category is WellsCategory.HIGH:
        label_key = "high_cancer"
    return {
        "wells_score": score,
        "wells_category": category,
        "wells_label": context.label("wells", label_key),
    }
