"""YEARS simplified criteria."""

from __future__ import annotations

from ...schemas.observations import ClinicalObservations
from .registry import ScoreContext, register


def years_count(observations: ClinicalObservations) -> int:
    return sum(
        1
        for present in (
            observations.years_dvt,
            observations.years_hemoptysis,
            observations.years_pe_likely,
        )
        if present
    )


@register("years")
def compute(observations: ClinicalObservations, context: ScoreContext) -> dict[str, object]:
    count = years_count(observations)
    label = context.label("years", "none") if count == 0 else context.label("years", "some", count=count)
    return {"years_count": count, "years_label": label}
