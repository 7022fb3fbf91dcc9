"""Normalisation helpers for numeric clinical inputs and D-dimer units."""

from __future__ import annotations

import math
from typing import Any, Dict

__all__ = [
    "to_float",
    "to_int",
    "ddimer_scale",
    "ddimer_to_mg_per_l",
    "ddimer_from_mg_per_l",
    "format_ddimer",
]


# Multiplier from mg/L (FEU) to the display unit.
_DDIMER_SCALE: Dict[str, float] = {
    "mg/L": 1.0,
    "µg/L": 1000.0,
    "ng/mL": 1000.0,
}


def to_float(value: Any) -> float | None:
    """Return *value* as a float, or ``None`` when it is empty or not numeric."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def to_int(value: Any) -> int | None:
    """Integer variant of :func:`to_float`; decimals are truncated ("65.9" -> 65)."""

    number = to_float(value)
    if number is None:
        return None
    return int(number)


def ddimer_scale(unit: Any) -> float:
    key = getattr(unit, "value", unit)
    try:
        return _DDIMER_SCALE[key]
    except KeyError:
        raise ValueError(f"Unsupported D-dimer unit: {key!r}") from None


def ddimer_to_mg_per_l(value: float, unit: Any) -> float:
    """Convert a D-dimer measurement expressed in *unit* to mg/L FEU."""

    return value / ddimer_scale(unit)


def ddimer_from_mg_per_l(value: float, unit: Any) -> float:
    return value * ddimer_scale(unit)


def format_ddimer(value_mg_per_l: float, unit: Any) -> str:
    """Render a mg/L value in *unit*: 2 decimals for mg/L, whole numbers otherwise."""

    scale = ddimer_scale(unit)
    if scale == 1.0:
        return f"{value_mg_per_l:.2f}"
    return f"{value_mg_per_l * scale:.0f}"
