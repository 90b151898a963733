"""Application services for bundle validation and installation."""

from .installer import InstallerService
from .uninstaller import UninstallerService
from .validator import validate_bundle

__all__ = ["InstallerService", "UninstallerService", "validate_bundle"]
