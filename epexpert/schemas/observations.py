"""Clinical observation record entered for a suspected pulmonary embolism case."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import Field, computed_field, field_validator, model_validator

from ..core.normalizer.units import to_float, to_int
from .common import StrictModel

__all__ = [
    "ClinicalObservations",
    "CtpaFindings",
    "DdimerUnit",
    "DERIVED_FIELDS",
    "Gender",
    "Provocation",
    "RenalFunction",
    "Subgroup",
    "TriState",
]


class Subgroup(str, Enum):
    STANDARD = "standard"
    PREGNANT = "pregnant"
    ACTIVE_CANCER = "active_cancer"


class Gender(str, Enum):
    UNSET = ""
    MALE = "male"
    FEMALE = "female"


class DdimerUnit(str, Enum):
    MG_L = "mg/L"
    UG_L = "µg/L"
    NG_ML = "ng/mL"


class RenalFunction(str, Enum):
    UNSET = ""
    NORMAL = "normal"
    MODERATE = "moderate"
    SEVERE = "severe"


class TriState(str, Enum):
    """Answer to a question that may not have been asked yet."""

    UNANSWERED = "unanswered"
    NEGATIVE = "negative"
    POSITIVE = "positive"


class CtpaFindings(str, Enum):
    UNSET = ""
    CENTRAL = "central"
    SEGMENTAL = "segmental"
    SUBSEGMENTAL = "subsegmental"
    BILATERAL = "bilateral"
    MASSIVE = "massive"


class Provocation(str, Enum):
    UNSET = ""
    TRANSIENT = "transient"
    UNPROVOKED = "unprovoked"


DERIVED_FIELDS = frozenset({"age_over_50", "hr_over_100"})


class ClinicalObservations(StrictModel):
    """Flat record of everything the clinician has entered so far.

    Numeric fields hold ``None`` until a usable value is entered. The
    ``age_over_50`` and ``hr_over_100`` flags are computed from the numeric
    fields, and the pregnancy and severe-renal couplings are re-applied every
    time a record is validated, so a record can never hold inconsistent values.
    """

    subgroup: Subgroup = Subgroup.STANDARD

    # Demographics and vital signs
    age: Optional[int] = Field(default=None, ge=0)
    gender: Gender = Gender.UNSET
    heart_rate: Optional[int] = None
    oxygen_saturation: Optional[float] = None
    sbp: Optional[float] = None

    # Wells
    clinical_dvt: bool = False
    pe_most_likely: bool = False
    immobilization: bool = False
    previous_vte: bool = False
    hemoptysis: bool = False
    malignancy: bool = False

    # PERC
    leg_swelling: bool = False
    recent_surgery: bool = False
    prior_vte: bool = False
    hormones: bool = False

    # YEARS
    years_dvt: bool = False
    years_hemoptysis: bool = False
    years_pe_likely: bool = False

    # D-dimer, expressed in ddimer_unit
    ddimer: Optional[float] = Field(default=None, ge=0)
    ddimer_unit: DdimerUnit = DdimerUnit.MG_L

    # Risk stratification
    troponin: bool = False
    bnp: bool = False
    rv_dysfunction: bool = False
    ctpa_findings: CtpaFindings = CtpaFindings.UNSET
    pe_confirmed: bool = False

    # Treatment
    bleeding_risk: bool = False
    renal_function: RenalFunction = RenalFunction.UNSET
    provocation: Provocation = Provocation.UNSET
    recurrent_episode: bool = False

    # Hestia
    hemodynamically_unstable: bool = False
    thrombolysis_needed: bool = False
    active_bleeding: bool = False
    oxygen_needed: bool = False
    pe_on_anticoag: bool = False
    severe_pain: bool = False
    social_reasons: bool = False
    renal_impairment: bool = False
    liver_impairment: bool = False
    pregnant_hestia: bool = False
    hit_history: bool = False

    # Active-cancer pathway
    chest_xray_performed: bool = False
    chest_xray_alternative: TriState = TriState.UNANSWERED
    ctpa_result: TriState = TriState.UNANSWERED

    @model_validator(mode="before")
    @classmethod
    def _apply_couplings(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = {key: value for key, value in data.items() if key not in DERIVED_FIELDS}
        if data.get("subgroup") == Subgroup.PREGNANT:
            data["gender"] = Gender.FEMALE
            data["pregnant_hestia"] = True
        if data.get("renal_function") == RenalFunction.SEVERE:
            data["renal_impairment"] = True
        return data

    @field_validator("age", "heart_rate", mode="before")
    @classmethod
    def _parse_whole_number(cls, value: Any) -> int | None:
        number = to_int(value)
        if number is None or number < 0:
            return None
        return number

    @field_validator("oxygen_saturation", "sbp", "ddimer", mode="before")
    @classmethod
    def _parse_measurement(cls, value: Any) -> float | None:
        number = to_float(value)
        if number is None or number < 0:
            return None
        return number

    @computed_field  # type: ignore[misc]
    @property
    def age_over_50(self) -> bool:
        return self.age is not None and self.age >= 50

    @computed_field  # type: ignore[misc]
    @property
    def hr_over_100(self) -> bool:
        return self.heart_rate is not None and self.heart_rate >= 100

    @property
    def is_pregnant(self) -> bool:
        return self.subgroup is Subgroup.PREGNANT

    @property
    def has_ddimer(self) -> bool:
        return self.ddimer is not None
