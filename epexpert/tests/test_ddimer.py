from __future__ import annotations

import pytest

from epexpert.core.normalizer.units import (
    ddimer_from_mg_per_l,
    ddimer_to_mg_per_l,
    format_ddimer,
    to_float,
    to_int,
)
from epexpert.core.scores import compute_results
from epexpert.core.scores.ddimer import age_adjusted_cutoff, ddimer_threshold
from epexpert.schemas import (
    ClinicalObservations,
    DdimerUnit,
    HighWellsDdimerPolicy,
    ScoringPolicy,
    Subgroup,
)

YEARS_POLICY = ScoringPolicy(high_wells_ddimer=HighWellsDdimerPolicy.YEARS_ADJUSTED)


@pytest.mark.parametrize(
    ("unit", "expected"),
    [(DdimerUnit.MG_L, "0.75"), (DdimerUnit.NG_ML, "750"), (DdimerUnit.UG_L, "750")],
)
def test_threshold_display_in_each_unit(unit, expected):
    assert format_ddimer(0.75, unit) == expected


def test_unit_conversion():
    assert ddimer_to_mg_per_l(750, DdimerUnit.NG_ML) == 0.75
    assert ddimer_to_mg_per_l(0.75, "mg/L") == 0.75
    assert ddimer_from_mg_per_l(1.0, DdimerUnit.UG_L) == 1000.0
    with pytest.raises(ValueError):
        ddimer_to_mg_per_l(1.0, "mmol/L")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1,5", 1.5), (" 2 ", 2.0), ("", None), ("abc", None), (None, None), (True, None), ("nan", None)],
)
def test_to_float(raw, expected):
    assert to_float(raw) == expected


def test_to_int_truncates():
    assert to_int("65.9") == 65
    assert to_int("") is None


def test_age_adjusted_cutoff():
    assert age_adjusted_cutoff(None) == 0.5
    assert age_adjusted_cutoff(50) == 0.5
    assert age_adjusted_cutoff(70) == 0.7
    assert age_adjusted_cutoff(81) == 0.81


def test_pregnant_without_years_criteria_uses_the_higher_cutoff():
    assert ddimer_threshold(70, 0, 0, Subgroup.PREGNANT) == 1.0
    assert ddimer_threshold(30, 0, 1, Subgroup.PREGNANT) == 0.5


def test_standard_moderate_wells_follows_years():
    assert ddimer_threshold(40, 3, 0, Subgroup.STANDARD) == 1.0
    assert ddimer_threshold(40, 3, 2, Subgroup.STANDARD) == 0.5
    assert ddimer_threshold(120, 3, 0, Subgroup.STANDARD) == 1.2


def test_high_wells_policy_variants():
    assert ddimer_threshold(40, 7, 0, Subgroup.STANDARD) == 0.5
    assert ddimer_threshold(40, 7, 0, Subgroup.STANDARD, YEARS_POLICY) == 1.0
    assert ddimer_threshold(75, 7, 0, Subgroup.STANDARD) == 0.75


@pytest.mark.parametrize("wells", [0, 3, 7])
@pytest.mark.parametrize("years", [0, 1, 3])
@pytest.mark.parametrize("subgroup", list(Subgroup))
def test_threshold_never_decreases_with_age_above_50(wells, years, subgroup):
    thresholds = [ddimer_threshold(age, wells, years, subgroup) for age in range(51, 111)]
    assert thresholds == sorted(thresholds)


@pytest.mark.parametrize("age", [None, 40, 65, 90])
def test_active_cancer_threshold_ignores_years(age):
    base = ClinicalObservations(subgroup=Subgroup.ACTIVE_CANCER, age=age)
    with_years = ClinicalObservations(
        subgroup=Subgroup.ACTIVE_CANCER, age=age, years_dvt=True, years_hemoptysis=True, years_pe_likely=True
    )
    assert compute_results(base).ddimer_threshold == compute_results(with_years).ddimer_threshold


def test_computed_threshold_uses_wells_and_years_results():
    observations = ClinicalObservations(age=70, subgroup=Subgroup.PREGNANT)
    assert compute_results(observations).ddimer_threshold == 1.0
    high = ClinicalObservations(age=40, clinical_dvt=True, pe_most_likely=True, previous_vte=True)
    assert compute_results(high).ddimer_threshold == 0.5
    assert compute_results(high, YEARS_POLICY).ddimer_threshold == 1.0
