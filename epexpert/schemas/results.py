"""Score results derived from a clinical observation record."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, computed_field, field_validator, model_validator

from .common import StrictModel

__all__ = ["RiskLevel", "ScoreResults", "WellsCategory"]


class WellsCategory(str, Enum):
    UNSET = ""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    LOW_MODERATE = "low_moderate"


class RiskLevel(str, Enum):
    UNSET = ""
    LOW = "low"
    INTERMEDIATE = "intermediate"
    HIGH = "high"


class ScoreResults(StrictModel):
    """Every score, category and threshold for the current observations.

    Always rebuilt as a whole; ``ScoreResults()`` is the record shown before
    anything has been computed.
    """

    wells_score: float = Field(default=0.0, ge=0)
    wells_category: WellsCategory = WellsCategory.UNSET
    wells_label: str = ""
    perc_count: int = Field(default=0, ge=0, le=8)
    years_count: int = Field(default=0, ge=0, le=3)
    years_label: str = ""
    ddimer_threshold: float = Field(default=0.5, gt=0)  # mg/L FEU
    hestia_score: int = Field(default=0, ge=0, le=11)
    risk_level: RiskLevel = RiskLevel.UNSET

    @model_validator(mode="before")
    @classmethod
    def _drop_computed(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = {k: v for k, v in data.items() if k not in ("perc_positive", "outpatient_eligible")}
        return data

    @field_validator("wells_score")
    @classmethod
    def ensure_half_point_steps(cls, value: float) -> float:
        if (value * 2) != int(value * 2):
            raise ValueError("wells_score must be a multiple of 0.5")
        return value

    @computed_field  # type: ignore[misc]
    @property
    def perc_positive(self) -> bool:
        return self.perc_count > 0

    @computed_field  # type: ignore[misc]
    @property
    def outpatient_eligible(self) -> bool:
        return self.hestia_score == 0
