from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from skillpack import __version__
from skillpack.cli import main as cli_main
from skillpack.settings import RuntimeSettings


@pytest.fixture()
def runtime_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RuntimeSettings:
    """Point the CLI at an isolated home directory."""
    home = tmp_path / "home"
    home.mkdir(parents=True, exist_ok=True)
    settings = RuntimeSettings(
        home_dir=home,
        skills_dir=home / ".claude" / "skills",
        cli_version=__version__,
    )
    monkeypatch.setattr(cli_main, "SETTINGS", settings, raising=False)
    return settings


@pytest.fixture()
def small_manifest_file(tmp_path: Path) -> Path:
    path = tmp_path / "manifest.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "name": "sample-bundle",
                "required_files": ["A.md"],
                "required_dirs": ["refs"],
                "optional_files": {"refs": ["x.md"]},
            },
            sort_keys=False,
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def answer(monkeypatch: pytest.MonkeyPatch):
    """Script replies to interactive prompts; records the prompts shown."""
    prompts: list[str] = []

    def install(*replies: str | None) -> list[str]:
        queue = list(replies)

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            reply = queue.pop(0)
            if reply is None:
                raise EOFError
            return reply

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return install
