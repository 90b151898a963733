"""Copy a bundle into its install location."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable
from uuid import uuid4

from skillpack.app import probe
from skillpack.domain.manifest import BundleManifest
from skillpack.domain.results import InstallResult, InstallStatus

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Path], bool]


def _location(path: Path) -> Path:
    # the final component is what gets replaced, so a symlink there is not followed
    try:
        return path.parent.resolve() / path.name
    except (OSError, RuntimeError):
        return path.absolute()


def _is_within(candidate: Path, parent: Path) -> bool:
    try:
        candidate.relative_to(parent)
    except ValueError:
        return False
    return True


@dataclass
class InstallerService:
    """Installs the bundle described by ``manifest``."""

    manifest: BundleManifest

    def install(self, source_root: Path, target: Path, confirm_overwrite: ConfirmFn) -> InstallResult:
        source = Path(source_root)
        target = Path(target)
        primary = self.manifest.primary_file

        if not probe.is_dir(source):
            return InstallResult(InstallStatus.SOURCE_NOT_FOUND, target, f"Bundle source directory not found: {source}")
        if not probe.is_file(source / primary):
            return InstallResult(InstallStatus.SOURCE_NOT_FOUND, target, f"{primary} not found in bundle source: {source}")
        source_location = source.resolve()
        target_location = _location(target)
        if _is_within(target_location, source_location):
            return InstallResult(
                InstallStatus.TARGET_NOT_WRITABLE, target, f"Install target {target} lies inside the bundle source"
            )
        if _is_within(source_location, target_location):
            return InstallResult(
                InstallStatus.TARGET_NOT_WRITABLE, target, f"Bundle source {source} lies inside the install target"
            )

        replacing = probe.lexists(target)
        if replacing and not confirm_overwrite(target):
            logger.info("overwrite of %s declined", target)
            return InstallResult(InstallStatus.CANCELLED, target, "Installation cancelled.")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return InstallResult(InstallStatus.TARGET_NOT_WRITABLE, target, f"Cannot create {target.parent}: {exc}")

        staging = target.parent / f".{target.name}.staging-{uuid4().hex}"
        try:
            shutil.copytree(source, staging, symlinks=True)
            if replacing:
                self._remove_existing(target)
            staging.rename(target)
        except OSError as exc:
            logger.debug("install into %s failed", target, exc_info=True)
            shutil.rmtree(staging, ignore_errors=True)
            return InstallResult(InstallStatus.TARGET_NOT_WRITABLE, target, f"Cannot write to {target}: {exc}")

        if not probe.is_file(target / primary):
            return InstallResult(
                InstallStatus.VERIFICATION_FAILED, target, f"Installation failed: {primary} not found in target directory"
            )
        logger.info("installed %s -> %s", source, target)
        return InstallResult(InstallStatus.INSTALLED, target, f"Installed at {target}")

    def _remove_existing(self, target: Path) -> None:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()


__all__ = ["InstallerService", "ConfirmFn"]
