"""Domain model exports."""

from .manifest import BundleManifest, ManifestError
from .report import FindingKind, ValidationFinding, ValidationReport
from .results import InstallResult, InstallStatus, UninstallResult, UninstallStatus

__all__ = [
    "BundleManifest",
    "ManifestError",
    "FindingKind",
    "ValidationFinding",
    "ValidationReport",
    "InstallResult",
    "InstallStatus",
    "UninstallResult",
    "UninstallStatus",
]
