"""Turn content-pack entries into Recommendation records."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from ...schemas.observations import ClinicalObservations
from ...schemas.recommendation import Recommendation, Stage
from ...schemas.results import ScoreResults
from ..normalizer.units import format_ddimer


def display_values(observations: ClinicalObservations, results: ScoreResults) -> Dict[str, Any]:
    """Placeholders shared by the stage texts, rendered in the user's D-dimer unit."""

    unit = observations.ddimer_unit.value
    value = ""
    if observations.ddimer is not None:
        value = f"{observations.ddimer:g} {unit}"
    return {
        "threshold": f"{format_ddimer(results.ddimer_threshold, unit)} {unit}",
        "value": value,
        "unit": unit,
        "years": results.years_count,
        "score": results.hestia_score,
    }


def build(
    stage: Stage,
    entry: Mapping[str, Any],
    *,
    notes: Iterable[str] = (),
    severity: Optional[str] = None,
    **values: Any,
) -> Recommendation:
    return Recommendation(
        stage=stage,
        outcome=entry["outcome"],
        text=entry["text"].format(**values),
        next_step=entry.get("next_step", "").format(**values),
        severity=entry.get("severity", "") if severity is None else severity,
        notes=tuple(notes),
        determinable=entry.get("determinable", True),
    )
