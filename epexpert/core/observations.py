"""Case lifecycle: start a new case and apply field changes consistently."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet

from ..schemas.observations import (
    DERIVED_FIELDS,
    ClinicalObservations,
    RenalFunction,
    Subgroup,
)

__all__ = [
    "ObservationUpdateError",
    "apply_change",
    "apply_changes",
    "locked_fields",
    "new_case",
]

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = frozenset(ClinicalObservations.model_fields)


@dataclass(frozen=True)
class ObservationUpdateError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - dataclass default
        return self.message


def new_case(subgroup: Subgroup = Subgroup.STANDARD) -> ClinicalObservations:
    """Default record for a new patient case."""

    return ClinicalObservations(subgroup=subgroup)


def locked_fields(observations: ClinicalObservations) -> FrozenSet[str]:
    """Fields whose value is currently forced by another field."""

    locked = set(DERIVED_FIELDS)
    if observations.subgroup is Subgroup.PREGNANT:
        locked.update({"gender", "pregnant_hestia"})
    if observations.renal_function is RenalFunction.SEVERE:
        locked.add("renal_impairment")
    return frozenset(locked)


def _release_couplings(field: str, previous: Any, data: Dict[str, Any]) -> None:
    value = data[field]
    if field == "subgroup" and previous == Subgroup.PREGNANT and value != Subgroup.PREGNANT:
        data["pregnant_hestia"] = False
    if field == "renal_function" and previous == RenalFunction.SEVERE and value != RenalFunction.SEVERE:
        data["renal_impairment"] = False


def apply_changes(observations: ClinicalObservations, /, **changes: Any) -> ClinicalObservations:
    """Return the next consistent record after applying *changes* in order.

    Each change is merged into the current values; leaving the pregnant
    subgroup or the severe renal category releases the field it was forcing.
    The merged record is then validated again, so couplings and derived flags
    override whatever was proposed for a locked field.
    """

    data = observations.model_dump(exclude=set(DERIVED_FIELDS))
    for field, value in changes.items():
        if field in DERIVED_FIELDS:
            raise ObservationUpdateError(f"'{field}' is derived and cannot be set directly")
        if field not in _EDITABLE_FIELDS:
            raise ObservationUpdateError(f"Unknown observation field '{field}'")
        previous = data[field]
        data[field] = value
        _release_couplings(field, previous, data)
    updated = ClinicalObservations.model_validate(data)
    locked = locked_fields(updated)
    overridden = sorted(f for f in changes if f in locked and getattr(updated, f) != changes[f])
    if overridden:
        logger.debug("Ignored changes to locked fields: %s", ", ".join(overridden))
    return updated


def apply_change(observations: ClinicalObservations, field: str, value: Any, /) -> ClinicalObservations:
    return apply_changes(observations, **{field: value})
