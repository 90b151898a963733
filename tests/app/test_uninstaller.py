from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from skillpack.app.uninstaller import UninstallerService
from skillpack.domain.results import UninstallStatus


def _installed(tmp_path: Path) -> Path:
    target = tmp_path / "skills" / "bundle"
    (target / "references").mkdir(parents=True)
    (target / "SKILL.md").write_text("skill", encoding="utf-8")
    (target / "references" / "a.md").write_text("a", encoding="utf-8")
    return target


def test_not_installed_is_idempotent(tmp_path: Path) -> None:
    service = UninstallerService()

    def never(target: Path) -> bool:
        raise AssertionError("confirmation must not be requested")

    first = service.uninstall(tmp_path / "absent", never)
    second = service.uninstall(tmp_path / "absent", never)

    assert first.status == second.status == UninstallStatus.NOT_INSTALLED
    assert first.ok


def test_declined_removal_keeps_files(tmp_path: Path) -> None:
    target = _installed(tmp_path)
    result = UninstallerService().uninstall(target, lambda _path: False)
    assert result.status == UninstallStatus.CANCELLED
    assert (target / "SKILL.md").read_text(encoding="utf-8") == "skill"
    assert (target / "references" / "a.md").exists()


def test_confirmed_removal(tmp_path: Path) -> None:
    target = _installed(tmp_path)
    result = UninstallerService().uninstall(target, lambda _path: True)
    assert result.status == UninstallStatus.REMOVED
    assert not target.exists()
    assert target.parent.exists()


def test_removal_failure_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = _installed(tmp_path)

    def stubborn_rmtree(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(shutil, "rmtree", stubborn_rmtree)
    result = UninstallerService().uninstall(target, lambda _path: True)

    assert result.status == UninstallStatus.REMOVAL_FAILED
    assert not result.ok
    assert target.exists()


def test_symlinked_install_removes_only_the_link(tmp_path: Path) -> None:
    checkout = _installed(tmp_path / "dev")
    link = tmp_path / "skills" / "bundle"
    link.parent.mkdir(parents=True)
    link.symlink_to(checkout, target_is_directory=True)

    result = UninstallerService().uninstall(link, lambda _path: True)

    assert result.status == UninstallStatus.REMOVED
    assert not link.is_symlink()
    assert (checkout / "SKILL.md").read_text(encoding="utf-8") == "skill"


def test_dangling_link_is_removed(tmp_path: Path) -> None:
    link = tmp_path / "skills" / "bundle"
    link.parent.mkdir(parents=True)
    link.symlink_to(tmp_path / "gone")

    result = UninstallerService().uninstall(link, lambda _path: True)

    assert result.status == UninstallStatus.REMOVED
    assert not link.is_symlink()
