"""Diagnostic stage: one independent decision tree per patient subgroup."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ...schemas.observations import ClinicalObservations, Subgroup, TriState
from ...schemas.recommendation import Recommendation, Stage
from ...schemas.results import ScoreResults, WellsCategory
from .predicates import ddimer_positive, perc_rules_out
from .texts import build, display_values

STAGE = Stage.DIAGNOSTIC


def _standard(
    observations: ClinicalObservations,
    results: ScoreResults,
    entries: Mapping[str, Any],
    values: Dict[str, Any],
) -> Recommendation:
    if results.wells_category is WellsCategory.HIGH:
        # D-dimer is not interpreted, even when a value was entered.
        return build(STAGE, entries["high_probability"], **values)
    if perc_rules_out(observations, results):
        return build(STAGE, entries["perc_negative"], **values)
    positive = ddimer_positive(observations, results)
    if positive is None:
        key = "ddimer_required_low" if results.wells_category is WellsCategory.LOW else "ddimer_required_moderate"
        return build(STAGE, entries[key], **values)
    return build(STAGE, entries["ddimer_positive" if positive else "ddimer_negative"], **values)


def _pregnant(
    observations: ClinicalObservations,
    results: ScoreResults,
    entries: Mapping[str, Any],
    values: Dict[str, Any],
) -> Recommendation:
    positive = ddimer_positive(observations, results)
    if observations.years_dvt:
        if positive is None:
            guidance, severity = entries["ultrasound_ddimer_absent"], "info"
        elif positive:
            guidance, severity = entries["ultrasound_ddimer_positive"], "warning"
        else:
            guidance, severity = entries["ultrasound_ddimer_negative"], "success"
        return build(
            STAGE,
            entries["compression_ultrasound"],
            notes=entries["notes"],
            severity=severity,
            ddimer_guidance=guidance.format(**values),
            **values,
        )

    notes = [entries["note_no_dvt"], *entries["notes"]]
    if positive is None:
        return build(STAGE, entries["ddimer_required"], notes=notes, **values)
    return build(STAGE, entries["ddimer_positive" if positive else "ddimer_negative"], notes=notes, **values)


def _imaging(
    observations: ClinicalObservations,
    entries: Mapping[str, Any],
    entry: Mapping[str, Any],
    values: Dict[str, Any],
) -> Recommendation:
    if observations.ctpa_result is TriState.POSITIVE:
        return build(STAGE, entries["ctpa_positive"], **values)
    if observations.ctpa_result is TriState.NEGATIVE:
        return build(STAGE, entries["ctpa_negative"], **values)
    return build(STAGE, entry, **values)


def _active_cancer(
    observations: ClinicalObservations,
    results: ScoreResults,
    entries: Mapping[str, Any],
    values: Dict[str, Any],
) -> Recommendation:
    if results.wells_category is WellsCategory.HIGH:
        return _imaging(observations, entries, entries["high_probability"], values)
    if not observations.chest_xray_performed:
        return build(STAGE, entries["chest_xray_required"], **values)
    if observations.chest_xray_alternative is TriState.UNANSWERED:
        return build(STAGE, entries["chest_xray_pending"], **values)
    if observations.chest_xray_alternative is TriState.POSITIVE:
        return build(STAGE, entries["alternative_diagnosis"], **values)
    positive = ddimer_positive(observations, results)
    if positive is None:
        return build(STAGE, entries["ddimer_required"], **values)
    if not positive:
        return build(STAGE, entries["ddimer_negative"], **values)
    return _imaging(observations, entries, entries["ddimer_positive"], values)


_SUBGROUP_TREES = {
    Subgroup.STANDARD: _standard,
    Subgroup.PREGNANT: _pregnant,
    Subgroup.ACTIVE_CANCER: _active_cancer,
}


def evaluate(
    observations: ClinicalObservations,
    results: ScoreResults,
    pack: Mapping[str, Any],
) -> Recommendation:
    tree = _SUBGROUP_TREES[observations.subgroup]
    entries = pack["diagnostic"][observations.subgroup.value]
    return tree(observations, results, entries, display_values(observations, results))
