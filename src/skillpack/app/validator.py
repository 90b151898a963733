"""Structural validation of a bundle against its manifest."""

from __future__ import annotations

import logging
from pathlib import Path

from skillpack.app import probe
from skillpack.domain.manifest import BundleManifest
from skillpack.domain.report import FindingKind, ValidationFinding, ValidationReport

logger = logging.getLogger(__name__)


def validate_bundle(bundle_root: Path, manifest: BundleManifest) -> ValidationReport:
    """Check required files, then required directories, then optional files.

    Each group keeps manifest declaration order so the report is reproducible.
    Optional files of a missing directory are not checked. Filesystem errors
    surface as missing entries, never as exceptions.
    """
    root = Path(bundle_root)
    report = ValidationReport(bundle_root=str(root))

    for relative in manifest.required_files:
        candidate = root / relative
        if probe.is_file(candidate):
            report.add(ValidationFinding(FindingKind.OK, relative, "file", line_count=probe.count_lines(candidate)))
        else:
            report.add(ValidationFinding(FindingKind.MISSING_REQUIRED, relative, "file"))

    present_dirs: set[str] = set()
    for relative in manifest.required_dirs:
        candidate = root / relative
        if probe.is_dir(candidate):
            present_dirs.add(relative)
            report.add(ValidationFinding(FindingKind.OK, relative, "directory", file_count=probe.count_files(candidate)))
        else:
            report.add(ValidationFinding(FindingKind.MISSING_REQUIRED, relative, "directory"))

    for directory, relative in manifest.iter_optional():
        if directory not in present_dirs:
            continue
        candidate = root / relative
        if probe.is_file(candidate):
            report.add(ValidationFinding(FindingKind.OK, relative, "optional", line_count=probe.count_lines(candidate)))
        else:
            report.add(ValidationFinding(FindingKind.MISSING_OPTIONAL, relative, "optional"))

    logger.debug(
        "validated %s: %d error(s), %d warning(s)", root, report.error_count, report.warning_count
    )
    return report


__all__ = ["validate_bundle"]
