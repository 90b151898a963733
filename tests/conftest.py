from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from skillpack.app.manifest_loader import default_manifest  # noqa: E402
from skillpack.domain.manifest import BundleManifest  # noqa: E402


def populate_bundle(root: Path, manifest: BundleManifest, *, optional: bool = True) -> Path:
    """Create every entry the manifest declares under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for relative in manifest.required_files:
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(f"# {relative}\n\nbody\n", encoding="utf-8")
    for relative in manifest.required_dirs:
        (root / relative).mkdir(parents=True, exist_ok=True)
    if optional:
        for _directory, relative in manifest.iter_optional():
            (root / relative).write_text(f"# {relative}\n", encoding="utf-8")
    return root


@pytest.fixture()
def manifest() -> BundleManifest:
    return default_manifest()


@pytest.fixture()
def small_manifest() -> BundleManifest:
    return BundleManifest(
        name="sample-bundle",
        required_files=("A.md",),
        required_dirs=("refs",),
        optional_files={"refs": ("x.md",)},
    )


@pytest.fixture()
def bundle_factory(tmp_path: Path) -> Callable[..., Path]:
    def factory(manifest: BundleManifest, name: str | None = None, *, optional: bool = True) -> Path:
        return populate_bundle(tmp_path / "src" / (name or manifest.name), manifest, optional=optional)

    return factory
