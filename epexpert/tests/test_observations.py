from __future__ import annotations

import pytest
from pydantic import ValidationError

from epexpert.core.observations import (
    ObservationUpdateError,
    apply_change,
    apply_changes,
    locked_fields,
    new_case,
)
from epexpert.schemas import ClinicalObservations, Gender, RenalFunction, Subgroup, TriState


def test_new_case_defaults():
    observations = new_case()
    assert observations.subgroup is Subgroup.STANDARD
    assert observations.age is None
    assert observations.ddimer is None
    assert observations.chest_xray_alternative is TriState.UNANSWERED
    assert observations.ctpa_result is TriState.UNANSWERED
    assert locked_fields(observations) == {"age_over_50", "hr_over_100"}


def test_new_pregnant_case_is_coupled():
    observations = new_case(Subgroup.PREGNANT)
    assert observations.gender is Gender.FEMALE
    assert observations.pregnant_hestia is True
    assert {"gender", "pregnant_hestia"} <= locked_fields(observations)


def test_age_and_heart_rate_derive_flags():
    observations = apply_changes(new_case(), age="49", heart_rate="99")
    assert observations.age_over_50 is False
    assert observations.hr_over_100 is False
    observations = apply_changes(observations, age=50, heart_rate=100)
    assert observations.age_over_50 is True
    assert observations.hr_over_100 is True


@pytest.mark.parametrize("raw", ["", "abc", "-3", None])
def test_unusable_numbers_are_cleared(raw):
    observations = apply_changes(new_case(), age=40, heart_rate=90)
    observations = apply_changes(observations, age=raw, heart_rate=raw)
    assert observations.age is None
    assert observations.heart_rate is None
    assert observations.age_over_50 is False
    assert observations.hr_over_100 is False


def test_pregnancy_forces_gender_and_hestia_flag():
    observations = apply_changes(new_case(), gender="male")
    observations = apply_change(observations, "subgroup", Subgroup.PREGNANT)
    assert observations.gender is Gender.FEMALE
    assert observations.pregnant_hestia is True

    observations = apply_changes(observations, gender="male", pregnant_hestia=False)
    assert observations.gender is Gender.FEMALE
    assert observations.pregnant_hestia is True


def test_leaving_pregnancy_releases_hestia_flag():
    observations = new_case(Subgroup.PREGNANT)
    observations = apply_change(observations, "subgroup", "standard")
    assert observations.pregnant_hestia is False
    assert observations.gender is Gender.FEMALE
    assert "pregnant_hestia" not in locked_fields(observations)


def test_severe_renal_function_forces_renal_impairment():
    observations = apply_change(new_case(), "renal_function", RenalFunction.SEVERE)
    assert observations.renal_impairment is True
    assert "renal_impairment" in locked_fields(observations)
    assert apply_change(observations, "renal_impairment", False).renal_impairment is True

    observations = apply_change(observations, "renal_function", "moderate")
    assert observations.renal_impairment is False


def test_renal_impairment_can_be_set_without_severe_category():
    observations = apply_change(new_case(), "renal_impairment", True)
    observations = apply_change(observations, "renal_function", "normal")
    assert observations.renal_impairment is True


def test_derived_fields_cannot_be_set():
    with pytest.raises(ObservationUpdateError):
        apply_change(new_case(), "age_over_50", True)


def test_unknown_fields_are_rejected():
    with pytest.raises(ObservationUpdateError) as excinfo:
        apply_change(new_case(), "weight", 70)
    assert "weight" in str(excinfo.value)


def test_invalid_enum_value_is_a_validation_error():
    with pytest.raises(ValidationError):
        apply_change(new_case(), "subgroup", "paediatric")


def test_records_are_immutable_and_round_trip():
    observations = apply_changes(new_case(Subgroup.PREGNANT), age=32, heart_rate=104)
    with pytest.raises(ValidationError):
        observations.age = 40
    dumped = observations.model_dump()
    assert dumped["hr_over_100"] is True
    assert ClinicalObservations.model_validate(dumped) == observations


def test_change_named_like_the_record_argument_is_an_unknown_field():
    with pytest.raises(ObservationUpdateError) as excinfo:
        apply_changes(new_case(), **{"observations": 1})
    assert "observations" in str(excinfo.value)
    with pytest.raises(ObservationUpdateError):
        apply_change(new_case(), "observations", 1)


def test_heart_rate_is_truncated_like_age():
    observations = apply_changes(new_case(), heart_rate="100.5")
    assert observations.heart_rate == 100
    assert observations.hr_over_100 is True
    assert apply_changes(new_case(), heart_rate="99.9").hr_over_100 is False
