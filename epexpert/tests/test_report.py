from __future__ import annotations

from epexpert.api.services.pathway_service import PathwayService
from epexpert.api.services.report_service import ReportService
from epexpert.core.observations import apply_changes, new_case
from epexpert.schemas import HestiaHemodynamicPolicy, ScoringPolicy, Subgroup


def test_summary_lists_scores_and_recommendations():
    service = ReportService()
    observations = apply_changes(new_case(), age=72, heart_rate=110, clinical_dvt=True, pe_confirmed=True)
    summary, text = service.build(observations)

    assert summary["pack"] == {"name": "pe_pathway", "version": "2025.1"}
    assert summary["policy"] == {"hestia_hemodynamic": "composite", "high_wells_ddimer": "age_adjusted"}
    assert summary["scores"]["wells_score"] == 4.5
    assert summary["scores"]["perc_positive"] is True
    assert summary["hestia_criteria"] == ["hemodynamically_unstable"]
    assert summary["current_stage"] == "disposition"
    assert [rec["stage"] for rec in summary["recommendations"]][-1] == "disposition"
    assert "RAPPORT EP-EXPERT" in text


def test_report_is_deterministic():
    service = ReportService()
    observations = apply_changes(new_case(Subgroup.PREGNANT), age=30, ddimer=0.4)
    assert service.build(observations) == service.build(observations)


def test_text_shows_perc_only_for_standard_low_wells():
    service = ReportService()
    _, standard = service.build(apply_changes(new_case(), age=30))
    _, pregnant = service.build(new_case(Subgroup.PREGNANT))
    assert "- PERC : 0/8 (négatif)" in standard
    assert "PERC" not in pregnant.split("RECOMMANDATIONS")[0]


def test_text_renders_threshold_in_display_unit():
    _, text = ReportService().build(apply_changes(new_case(), age=40, ddimer=800, ddimer_unit="ng/mL"))
    assert "- Seuil D-dimères : 1000 ng/mL" in text
    assert "- D-dimères mesurés : 800 ng/mL" in text


def test_text_lists_positive_hestia_criteria():
    _, text = ReportService().build(new_case(Subgroup.PREGNANT))
    assert "- Hestia : 1/11" in text
    assert "  * Grossesse" in text


def test_report_stops_at_requested_stage():
    service = ReportService()
    summary, text = service.build(apply_changes(new_case(), pe_confirmed=True), until="treatment")
    assert summary["current_stage"] == "treatment"
    assert "ORIENTATION" not in text


def test_report_uses_service_policy():
    pathways = PathwayService(policy=ScoringPolicy(hestia_hemodynamic=HestiaHemodynamicPolicy.FLAG_ONLY))
    summary, _ = ReportService(pathways).build(apply_changes(new_case(), heart_rate=120))
    assert summary["policy"]["hestia_hemodynamic"] == "flag_only"
    assert summary["hestia_criteria"] == []
