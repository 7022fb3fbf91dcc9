"""PERC rule-out criteria.

Only meaningful for a standard patient with a low Wells score; the
diagnostic stage applies that gate, the count itself is always computed.
"""

from __future__ import annotations

from ...schemas.observations import ClinicalObservations
from .registry import ScoreContext, register


def perc_count(observations: ClinicalObservations) -> int:
    count = 0
    if observations.age_over_50:
        count += 1
    if observations.hr_over_100:
        count += 1
    if observations.oxygen_saturation is not None and observations.oxygen_saturation < 95:
        count += 1
    if observations.leg_swelling:
        count += 1
    if observations.hemoptysis:
        count += 1
    if observations.recent_surgery:
        count += 1
    if observations.prior_vte:
        count += 1
    if observations.hormones:
        count += 1
    return count


@register("perc")
def compute(observations: ClinicalObservations, context: ScoreContext) -> dict[str, object]:
    return {"perc_count": perc_count(observations)}
