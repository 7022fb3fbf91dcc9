"""Case summaries for the medical record: structured JSON and plain text."""
from __future__ import annotations

from typing import Any, Dict, List

from ...content import load_pack
from ...core.normalizer.units import format_ddimer
from ...core.scores.hestia import hestia_criteria
from ...schemas.observations import ClinicalObservations, Subgroup
from ...schemas.recommendation import PathwayOutcome, Stage
from ...schemas.results import WellsCategory
from .pathway_service import PathwayService, pathway_service


class ReportService:
    """Re-derive the pathway for a case and render it as a report.

    The output only depends on the observations, the scoring policy and the
    content pack, so the same case always yields the same report.
    """

    def __init__(self, pathways: PathwayService = pathway_service) -> None:
        self._pathways = pathways

    def build(
        self,
        observations: ClinicalObservations,
        until: Stage | str | None = None,
    ) -> tuple[Dict[str, Any], str]:
        outcome = self._pathways.pathway(observations, until)
        return self.to_summary(outcome), self.to_text(outcome)

    def to_summary(self, outcome: PathwayOutcome) -> Dict[str, Any]:
        pack = load_pack(self._pathways.pack_id)
        policy = self._pathways.policy
        observations = outcome.observations
        results = outcome.results
        criteria = hestia_criteria(observations, policy)
        return {
            "pack": {"name": pack["meta"]["name"], "version": pack["meta"]["version"]},
            "policy": policy.model_dump(mode="json"),
            "subgroup": observations.subgroup.value,
            "scores": results.model_dump(mode="json"),
            "ddimer": {
                "value": observations.ddimer,
                "unit": observations.ddimer_unit.value,
                "threshold": format_ddimer(results.ddimer_threshold, observations.ddimer_unit),
            },
            "hestia_criteria": [name for name, met in criteria.items() if met],
            "current_stage": outcome.current_stage.value,
            "recommendations": [rec.model_dump(mode="json") for rec in outcome.recommendations],
        }

    def to_text(self, outcome: PathwayOutcome) -> str:
        pack = load_pack(self._pathways.pack_id)
        labels = pack["labels"]
        observations = outcome.observations
        results = outcome.results
        unit = observations.ddimer_unit.value

        lines: List[str] = [
            "RAPPORT EP-EXPERT",
            f"Protocole : {pack['meta']['name']} {pack['meta']['version']}",
            f"Sous-groupe : {labels['subgroup'][observations.subgroup.value]}",
            "",
            "SCORES",
            f"- Wells : {results.wells_score:g} ({results.wells_label or '-'})",
        ]
        if observations.subgroup is Subgroup.STANDARD and results.wells_category is WellsCategory.LOW:
            status = "positif" if results.perc_positive else "négatif"
            lines.append(f"- PERC : {results.perc_count}/8 ({status})")
        lines.append(f"- YEARS : {results.years_label or '-'}")
        lines.append(f"- Seuil D-dimères : {format_ddimer(results.ddimer_threshold, unit)} {unit}")
        if observations.ddimer is not None:
            lines.append(f"- D-dimères mesurés : {observations.ddimer:g} {unit}")
        lines.append(f"- Hestia : {results.hestia_score}/11")
        lines.extend(self._hestia_lines(outcome, labels["hestia"]))
        risk_key = results.risk_level.value or "unset"
        lines.append(f"- Niveau de risque : {labels['risk_level'][risk_key]}")

        for rec in outcome.recommendations:
            lines.append("")
            lines.append(labels["stages"][rec.stage.value].upper())
            lines.append(rec.text)
            if rec.next_step:
                lines.append(f"Conduite à tenir : {rec.next_step}")
            lines.extend(f"  * {note}" for note in rec.notes)
        return "\n".join(lines) + "\n"

    def _hestia_lines(self, outcome: PathwayOutcome, hestia_labels: Dict[str, str]) -> List[str]:
        criteria = hestia_criteria(outcome.observations, self._pathways.policy)
        return [f"  * {hestia_labels[name]}" for name, met in criteria.items() if met]


report_service = ReportService()
