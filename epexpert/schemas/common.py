"""Common schema utilities for EP-Expert."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Immutable base model rejecting unknown fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)
