from __future__ import annotations

from pathlib import Path

from skillpack.domain.report import FindingKind, ValidationFinding, ValidationReport
from skillpack.domain.results import InstallResult, InstallStatus, UninstallResult, UninstallStatus


def test_report_counts_and_pass_policy() -> None:
    report = ValidationReport(bundle_root="/tmp/bundle")
    report.add(ValidationFinding(FindingKind.OK, "A.md", "file", line_count=3))
    report.add(ValidationFinding(FindingKind.MISSING_OPTIONAL, "refs/x.md", "optional"))
    report.add(ValidationFinding(FindingKind.MISSING_OPTIONAL, "refs/y.md", "optional"))
    assert report.passed
    assert report.error_count == 0
    assert report.warning_count == 2

    report.add(ValidationFinding(FindingKind.MISSING_REQUIRED, "refs", "directory"))
    assert not report.passed
    assert report.error_count == 1


def test_report_to_dict_omits_empty_diagnostics() -> None:
    report = ValidationReport(bundle_root="root")
    report.add(ValidationFinding(FindingKind.OK, "refs", "directory", file_count=0))
    report.add(ValidationFinding(FindingKind.MISSING_REQUIRED, "A.md", "file"))
    payload = report.to_dict()
    assert payload["passed"] is False
    assert payload["findings"][0] == {"kind": "ok", "path": "refs", "group": "directory", "file_count": 0}
    assert payload["findings"][1] == {"kind": "missing_required", "path": "A.md", "group": "file"}


def test_result_ok_flags() -> None:
    target = Path("/tmp/t")
    assert InstallResult(InstallStatus.INSTALLED, target).ok
    assert InstallResult(InstallStatus.CANCELLED, target).ok
    assert not InstallResult(InstallStatus.SOURCE_NOT_FOUND, target).ok
    assert not InstallResult(InstallStatus.VERIFICATION_FAILED, target).ok
    assert not InstallResult(InstallStatus.TARGET_NOT_WRITABLE, target).ok
    assert UninstallResult(UninstallStatus.NOT_INSTALLED, target).ok
    assert not UninstallResult(UninstallStatus.REMOVAL_FAILED, target).ok
    assert InstallResult(InstallStatus.INSTALLED, target).to_dict()["status"] == "installed"
