"""Scoring policy variants.

Two rules exist in two versions in the source material and neither is known
to be authoritative, so both are selectable:

* the Hestia hemodynamic-instability criterion (explicit flag only, or the
  flag OR SBP < 100 OR HR > 100);
* the D-dimer threshold for a standard patient with Wells > 6 (age-adjusted
  cutoff only, or the same YEARS-conditioned rule as Wells <= 6).
"""

from __future__ import annotations

from enum import Enum

from .common import StrictModel

__all__ = ["HestiaHemodynamicPolicy", "HighWellsDdimerPolicy", "ScoringPolicy"]


class HestiaHemodynamicPolicy(str, Enum):
    COMPOSITE = "composite"
    FLAG_ONLY = "flag_only"


class HighWellsDdimerPolicy(str, Enum):
    AGE_ADJUSTED = "age_adjusted"
    YEARS_ADJUSTED = "years_adjusted"


class ScoringPolicy(StrictModel):
    hestia_hemodynamic: HestiaHemodynamicPolicy = HestiaHemodynamicPolicy.COMPOSITE
    high_wells_ddimer: HighWellsDdimerPolicy = HighWellsDdimerPolicy.AGE_ADJUSTED
