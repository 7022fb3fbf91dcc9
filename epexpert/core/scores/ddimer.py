"""D-dimer interpretation threshold, always in mg/L FEU."""

from __future__ import annotations

from typing import Optional

from ...schemas.observations import ClinicalObservations, Subgroup
from ...schemas.policy import HighWellsDdimerPolicy, ScoringPolicy
from .registry import ScoreContext, register

STANDARD_CUTOFF = 0.5
YEARS_NEGATIVE_CUTOFF = 1.0


def age_adjusted_cutoff(age: Optional[int]) -> float:
    """age x 0.01 mg/L above 50 years, 0.5 mg/L otherwise."""

    if age is not None and age > 50:
        return age / 100
    return STANDARD_CUTOFF


def years_adjusted_cutoff(age: Optional[int], years_count: int) -> float:
    floor = YEARS_NEGATIVE_CUTOFF if years_count == 0 else STANDARD_CUTOFF
    return max(floor, age_adjusted_cutoff(age))


def ddimer_threshold(
    age: Optional[int],
    wells_score: float,
    years_count: int,
    subgroup: Subgroup,
    policy: Optional[ScoringPolicy] = None,
) -> float:
    policy = policy or ScoringPolicy()
    if subgroup is Subgroup.ACTIVE_CANCER:
        return age_adjusted_cutoff(age)
    if subgroup is Subgroup.PREGNANT or wells_score <= 6:
        return years_adjusted_cutoff(age, years_count)
    if policy.high_wells_ddimer is HighWellsDdimerPolicy.YEARS_ADJUSTED:
        return years_adjusted_cutoff(age, years_count)
    return age_adjusted_cutoff(age)


@register("ddimer_threshold")
def compute(observations: ClinicalObservations, context: ScoreContext) -> dict[str, object]:
    threshold = ddimer_threshold(
        observations.age,
        float(context.partial.get("wells_score", 0.0)),
        int(context.partial.get("years_count", 0)),
        observations.subgroup,
        context.policy,
    )
    return {"ddimer_threshold": threshold}
