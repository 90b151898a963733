"""Outcome values returned by install and uninstall operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict


class InstallStatus(str, Enum):
    INSTALLED = "installed"
    CANCELLED = "cancelled"
    SOURCE_NOT_FOUND = "source_not_found"
    TARGET_NOT_WRITABLE = "target_not_writable"
    VERIFICATION_FAILED = "verification_failed"


class UninstallStatus(str, Enum):
    REMOVED = "removed"
    NOT_INSTALLED = "not_installed"
    CANCELLED = "cancelled"
    REMOVAL_FAILED = "removal_failed"


@dataclass(frozen=True)
class InstallResult:
    status: InstallStatus
    target: Path
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (InstallStatus.INSTALLED, InstallStatus.CANCELLED)

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "target": str(self.target), "message": self.message}


@dataclass(frozen=True)
class UninstallResult:
    status: UninstallStatus
    target: Path
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status != UninstallStatus.REMOVAL_FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "target": str(self.target), "message": self.message}


__all__ = ["InstallStatus", "UninstallStatus", "InstallResult", "UninstallResult"]
