"""Load bundle manifests from YAML files or packaged defaults."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator, Mapping, Tuple

import yaml
from jsonschema import Draft202012Validator

from skillpack.domain.manifest import BundleManifest, ManifestError
from skillpack.resources import load_default_manifest_payload, load_schema

_SCHEMA_RESOURCE = "bundle_manifest.schema.json"


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(_SCHEMA_RESOURCE))


def iter_schema_errors(payload: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield (path, message) pairs for schema issues in the manifest."""
    for error in sorted(_validator().iter_errors(payload), key=lambda err: [str(item) for item in err.absolute_path]):
        path = ".".join(str(item) for item in error.absolute_path)
        yield path, error.message


def manifest_from_payload(payload: Mapping[str, Any], *, source: str = "<memory>") -> BundleManifest:
    data = {key: value for key, value in payload.items() if key != "__source__"}
    problems = [f"{path or '<root>'}: {message}" for path, message in iter_schema_errors(data)]
    if problems:
        raise ManifestError(f"manifest {source} is invalid: " + "; ".join(problems))
    try:
        return BundleManifest.from_dict(data)
    except ManifestError as exc:
        raise ManifestError(f"manifest {source} is invalid: {exc}") from exc


def load_manifest(path: Path) -> BundleManifest:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot read manifest {path}: {exc}") from exc
    try:
        payload = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ManifestError(f"manifest {path} is not valid YAML: {exc}") from exc
    if not isinstance(payload, dict):
        raise ManifestError(f"manifest {path} must be a mapping")
    return manifest_from_payload(payload, source=str(path))


def default_manifest() -> BundleManifest:
    payload = load_default_manifest_payload()
    return manifest_from_payload(payload, source=str(payload.get("__source__", "default.yaml")))


__all__ = ["default_manifest", "iter_schema_errors", "load_manifest", "manifest_from_payload"]
