"""Risk stratification stage: fixed guidance keyed by risk tier."""

from __future__ import annotations

from typing import Any, List, Mapping

from ...schemas.observations import ClinicalObservations, CtpaFindings
from ...schemas.recommendation import Recommendation, Stage
from ...schemas.results import ScoreResults
from .predicates import is_pe_confirmed, risk_tier
from .texts import build

STAGE = Stage.RISK_STRATIFICATION


def evaluate(
    observations: ClinicalObservations,
    results: ScoreResults,
    pack: Mapping[str, Any],
) -> Recommendation:
    section = pack["risk_stratification"]
    if not is_pe_confirmed(observations):
        return build(STAGE, section["pe_not_confirmed"])

    labels = pack.get("labels", {})
    level = labels.get("risk_level", {}).get(results.risk_level.value or "unset", "")
    notes: List[str] = [section["risk_level_note"].format(level=level)]
    if observations.sbp is not None and observations.sbp < 90 and not observations.hemodynamically_unstable:
        notes.append(section["sbp_note"])
    if observations.ctpa_findings is not CtpaFindings.UNSET:
        findings = labels.get("ctpa_findings", {}).get(observations.ctpa_findings.value, "")
        notes.append(section["ctpa_findings_note"].format(findings=findings))
    return build(STAGE, section[risk_tier(observations).value], notes=notes)
