"""Validation findings and the report that aggregates them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class FindingKind(str, Enum):
    OK = "ok"
    MISSING_REQUIRED = "missing_required"
    MISSING_OPTIONAL = "missing_optional"


@dataclass(frozen=True)
class ValidationFinding:
    kind: FindingKind
    path: str
    group: str  # file | directory | optional
    file_count: int | None = None
    line_count: int | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == FindingKind.MISSING_REQUIRED

    @property
    def is_warning(self) -> bool:
        return self.kind == FindingKind.MISSING_OPTIONAL

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kind": self.kind.value, "path": self.path, "group": self.group}
        if self.file_count is not None:
            payload["file_count"] = self.file_count
        if self.line_count is not None:
            payload["line_count"] = self.line_count
        return payload


@dataclass
class ValidationReport:
    bundle_root: str
    findings: List[ValidationFinding] = field(default_factory=list)

    def add(self, finding: ValidationFinding) -> None:
        self.findings.append(finding)

    @property
    def error_count(self) -> int:
        return sum(1 for finding in self.findings if finding.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for finding in self.findings if finding.is_warning)

    @property
    def passed(self) -> bool:
        return self.error_count == 0

    def by_group(self, group: str) -> List[ValidationFinding]:
        return [finding for finding in self.findings if finding.group == group]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bundle_root": self.bundle_root,
            "passed": self.passed,
            "errors": self.error_count,
            "warnings": self.warning_count,
            "findings": [finding.to_dict() for finding in self.findings],
        }


__all__ = ["FindingKind", "ValidationFinding", "ValidationReport"]
