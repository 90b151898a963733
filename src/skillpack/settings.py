"""Runtime settings for the skillpack CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillpack import __version__


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    skills_dir: Path
    log_dir: Path | None = None
    cli_version: str = __version__

    @property
    def telemetry_enabled(self) -> bool:
        return self.log_dir is not None

    def default_target(self, bundle_name: str) -> Path:
        return self.skills_dir / bundle_name


def _default_home_dir() -> Path:
    return Path.home()


def load_settings(log_dir: Path | None = None) -> RuntimeSettings:
    home = _default_home_dir()
    return RuntimeSettings(
        home_dir=home,
        skills_dir=home / ".claude" / "skills",
        log_dir=log_dir,
    )


SETTINGS = load_settings()
