"""Remove an installed bundle."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from skillpack.app import probe
from skillpack.app.installer import ConfirmFn
from skillpack.domain.results import UninstallResult, UninstallStatus

logger = logging.getLogger(__name__)


@dataclass
class UninstallerService:
    def uninstall(self, target: Path, confirm_removal: ConfirmFn) -> UninstallResult:
        target = Path(target)
        if not probe.lexists(target):
            return UninstallResult(UninstallStatus.NOT_INSTALLED, target, f"Bundle is not installed at: {target}")
        if not confirm_removal(target):
            logger.info("removal of %s declined", target)
            return UninstallResult(UninstallStatus.CANCELLED, target, "Uninstallation cancelled.")

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            logger.warning("error while removing %s: %s", target, exc)

        if probe.lexists(target):
            return UninstallResult(
                UninstallStatus.REMOVAL_FAILED, target, "Uninstallation failed: Directory still exists"
            )
        logger.info("removed %s", target)
        return UninstallResult(UninstallStatus.REMOVED, target, f"Removed {target}")


__all__ = ["UninstallerService"]
