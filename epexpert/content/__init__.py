"""Helpers to load clinical content packs (scores to run and guidance texts)."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import yaml

__all__ = ["load_pack"]


@lru_cache(maxsize=8)
def load_pack(pack_id: str) -> Dict[str, Any]:
    """Load the YAML pack identified by *pack_id*."""

    resource = resources.files(__name__).joinpath("packs").joinpath(f"{pack_id}.yml")
    with resource.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)
