"""Disposition stage: outpatient eligibility for low-risk PE from Hestia."""

from __future__ import annotations

from typing import Any, List, Mapping

from ...schemas.observations import ClinicalObservations
from ...schemas.recommendation import Recommendation, Stage
from ...schemas.results import ScoreResults
from .predicates import has_active_cancer, is_low_risk, is_pe_confirmed
from .texts import build

STAGE = Stage.DISPOSITION


def evaluate(
    observations: ClinicalObservations,
    results: ScoreResults,
    pack: Mapping[str, Any],
) -> Recommendation:
    section = pack["disposition"]
    if not (is_pe_confirmed(observations) and is_low_risk(observations)):
        return build(STAGE, section["not_applicable"])

    notes: List[str] = []
    if has_active_cancer(observations):
        # Caution only; eligibility still comes from Hestia alone.
        notes.append(section["cancer_caution"])
    if results.outpatient_eligible:
        notes.extend(section["outpatient_modalities"])
    notes.extend(section["follow_up"])
    key = "outpatient" if results.outpatient_eligible else "hospitalisation"
    return build(STAGE, section[key], notes=notes, score=results.hestia_score)
