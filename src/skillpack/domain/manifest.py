"""Declarative layout of an installable bundle."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple


class ManifestError(ValueError):
    """Raised when a bundle manifest violates its invariants."""


def _normalise_entry(value: str, *, kind: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ManifestError(f"{kind} entry must be a non-empty string")
    path = PurePosixPath(value.strip().replace("\\", "/"))
    if path.is_absolute() or ".." in path.parts or path.as_posix() == ".":
        raise ManifestError(f"{kind} entry must be a relative path inside the bundle: {value!r}")
    return path.as_posix()


def _dedupe(entries: Iterable[str], *, kind: str) -> Tuple[str, ...]:
    seen: dict[str, None] = {}
    for entry in entries:
        seen.setdefault(_normalise_entry(entry, kind=kind), None)
    return tuple(seen)


@dataclass(frozen=True)
class BundleManifest:
    """Required files, required directories and per-directory optional files."""

    name: str
    required_files: Tuple[str, ...]
    required_dirs: Tuple[str, ...]
    optional_files: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ManifestError("manifest name must be a non-empty string")
        name = self.name.strip()
        if "/" in name or "\\" in name or name in {".", ".."}:
            raise ManifestError(f"manifest name must be a plain directory name: {self.name!r}")
        required_files = _dedupe(self.required_files, kind="required file")
        required_dirs = _dedupe(self.required_dirs, kind="required directory")
        if not required_files:
            raise ManifestError("manifest must declare at least one required file")
        if not required_dirs:
            raise ManifestError("manifest must declare at least one required directory")

        optional: Dict[str, Tuple[str, ...]] = {}
        for directory, names in self.optional_files.items():
            key = _normalise_entry(directory, kind="optional directory")
            if key not in required_dirs:
                raise ManifestError(f"optional files declared for undeclared directory '{key}'")
            optional[key] = _dedupe(names or (), kind="optional file")

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "required_files", required_files)
        object.__setattr__(self, "required_dirs", required_dirs)
        # keep optional groups in required directory order
        object.__setattr__(
            self,
            "optional_files",
            {directory: optional[directory] for directory in required_dirs if directory in optional},
        )

    @property
    def primary_file(self) -> str:
        return self.required_files[0]

    def iter_optional(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(directory, relative_path)`` pairs in declaration order."""
        for directory, names in self.optional_files.items():
            for name in names:
                yield directory, f"{directory}/{name}"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "required_files": list(self.required_files),
            "required_dirs": list(self.required_dirs),
            "optional_files": {key: list(value) for key, value in self.optional_files.items()},
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BundleManifest":
        optional = payload.get("optional_files") or {}
        if not isinstance(optional, Mapping):
            raise ManifestError("optional_files must be a mapping of directory to file names")
        return cls(
            name=str(payload.get("name", "")),
            required_files=tuple(payload.get("required_files") or ()),
            required_dirs=tuple(payload.get("required_dirs") or ()),
            optional_files={str(key): tuple(value or ()) for key, value in optional.items()},
        )


__all__ = ["BundleManifest", "ManifestError"]
