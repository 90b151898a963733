"""Packaged resources for skillpack."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import yaml

__all__ = ["load_default_manifest_payload", "load_schema"]


@lru_cache(maxsize=1)
def load_default_manifest_payload() -> Dict[str, Any]:
    """Return the manifest shipped with the package as a plain mapping."""

    entry = resources.files(__name__ + ".manifests") / "default.yaml"
    payload = yaml.safe_load(entry.read_text("utf-8")) or {}
    payload["__source__"] = entry.name
    return payload


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    resource = resources.files(__name__) / name
    with resource.open("r", encoding="utf-8") as handle:
        return json.load(handle)
