"""Packaged resources for make-project."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

__all__ = ["load_telemetry_schema"]


@lru_cache(maxsize=1)
def load_telemetry_schema() -> Dict[str, Any]:
    """Return the JSON schema every telemetry record is validated against."""

    raw = (resources.files(__name__) / "telemetry.schema.json").read_text("utf-8")
    return json.loads(raw)
