from __future__ import annotations

import pytest

from epexpert.core.observations import apply_changes, new_case
from epexpert.core.pathway import evaluate_stage
from epexpert.schemas import DdimerUnit, Stage, Subgroup, TriState


def diagnose(subgroup=Subgroup.STANDARD, **changes):
    return evaluate_stage(Stage.DIAGNOSTIC, apply_changes(new_case(subgroup), **changes))


def test_low_wells_with_negative_perc_excludes_pe():
    rec = diagnose(age=30, heart_rate=80, oxygen_saturation=98)
    assert rec.outcome == "pe_excluded"
    assert rec.severity == "success"
    assert "PERC" in rec.text


def test_low_wells_with_positive_perc_requires_ddimer():
    rec = diagnose(age=60)
    assert rec.outcome == "ddimer_required"
    assert rec.determinable is False
    assert "1.00 mg/L" in rec.next_step


def test_moderate_wells_requires_ddimer():
    rec = diagnose(age=40, clinical_dvt=True)
    assert rec.outcome == "ddimer_required"
    assert "Wells modéré" in rec.text
    assert "1.00 mg/L" in rec.next_step


def test_moderate_wells_negative_ddimer_in_display_unit():
    rec = diagnose(age=40, clinical_dvt=True, ddimer=800, ddimer_unit=DdimerUnit.NG_ML)
    assert rec.outcome == "pe_excluded"
    assert "800 ng/mL" in rec.text
    assert "1000 ng/mL" in rec.text


def test_ddimer_equal_to_threshold_is_positive():
    rec = diagnose(age=40, clinical_dvt=True, years_dvt=True, ddimer="0.5")
    assert rec.outcome == "imaging_required"
    assert rec.severity == "warning"


def test_high_wells_goes_straight_to_imaging_even_with_ddimer():
    rec = diagnose(clinical_dvt=True, pe_most_likely=True, immobilization=True, ddimer=0.1)
    assert rec.outcome == "imaging_direct"
    assert rec.severity == "error"


def test_pregnant_dvt_signs_recommend_compression_ultrasound():
    rec = diagnose(Subgroup.PREGNANT, age=30, years_dvt=True)
    assert rec.outcome == "compression_ultrasound"
    assert rec.severity == "info"
    assert "0.50 mg/L" in rec.next_step
    assert len(rec.notes) == 3


@pytest.mark.parametrize(("ddimer", "severity"), [(0.9, "warning"), (0.2, "success")])
def test_pregnant_ultrasound_guidance_reads_the_ddimer(ddimer, severity):
    rec = diagnose(Subgroup.PREGNANT, age=30, years_dvt=True, ddimer=ddimer)
    assert rec.outcome == "compression_ultrasound"
    assert rec.severity == severity


def test_pregnant_without_dvt_uses_years_threshold():
    rec = diagnose(Subgroup.PREGNANT, age=70)
    assert rec.outcome == "ddimer_required"
    assert "1.00 mg/L" in rec.text
    assert rec.notes[0].startswith("L'échographie veineuse")


def test_pregnant_negative_ddimer_excludes_pe():
    assert diagnose(Subgroup.PREGNANT, age=30, ddimer=0.8).outcome == "pe_excluded"
    assert diagnose(Subgroup.PREGNANT, age=30, ddimer=1.2).outcome == "imaging_required"


def test_pregnant_tree_ignores_wells():
    rec = diagnose(Subgroup.PREGNANT, clinical_dvt=True, pe_most_likely=True, immobilization=True)
    assert rec.outcome == "ddimer_required"


def test_active_cancer_low_wells_requests_chest_xray_first():
    rec = diagnose(Subgroup.ACTIVE_CANCER, clinical_dvt=True)
    assert rec.outcome == "chest_xray_required"
    assert rec.determinable is False
    assert "D-dimères" in rec.text
    assert "direct" not in rec.text


def test_active_cancer_xray_interpretation_pending():
    rec = diagnose(Subgroup.ACTIVE_CANCER, chest_xray_performed=True)
    assert rec.outcome == "chest_xray_pending"


def test_active_cancer_alternative_diagnosis():
    rec = diagnose(Subgroup.ACTIVE_CANCER, chest_xray_performed=True, chest_xray_alternative=TriState.POSITIVE)
    assert rec.outcome == "alternative_diagnosis"


def test_active_cancer_uses_age_adjusted_threshold():
    changes = dict(chest_xray_performed=True, chest_xray_alternative="negative", age=80)
    assert diagnose(Subgroup.ACTIVE_CANCER, **changes).outcome == "ddimer_required"
    assert diagnose(Subgroup.ACTIVE_CANCER, ddimer=0.7, **changes).outcome == "pe_excluded"
    assert diagnose(Subgroup.ACTIVE_CANCER, ddimer=0.8, **changes).outcome == "imaging_required"


@pytest.mark.parametrize(("ctpa", "outcome"), [("positive", "pe_confirmed"), ("negative", "pe_excluded")])
def test_active_cancer_ctpa_result_closes_the_tree(ctpa, outcome):
    rec = diagnose(Subgroup.ACTIVE_CANCER, clinical_dvt=True, pe_most_likely=True, ctpa_result=ctpa)
    assert rec.outcome == outcome


def test_active_cancer_high_wells_skips_xray():
    rec = diagnose(Subgroup.ACTIVE_CANCER, clinical_dvt=True, pe_most_likely=True)
    assert rec.outcome == "imaging_direct"
