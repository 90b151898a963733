#!/usr/bin/env python3
"""Entry point for the skillpack CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from textwrap import dedent

from skillpack import __version__
from skillpack.app import probe
from skillpack.app.installer import ConfirmFn, InstallerService
from skillpack.app.manifest_loader import default_manifest, load_manifest
from skillpack.app.uninstaller import UninstallerService
from skillpack.app.validator import validate_bundle
from skillpack.domain.manifest import BundleManifest, ManifestError
from skillpack.domain.report import FindingKind, ValidationFinding, ValidationReport
from skillpack.domain.results import InstallResult, InstallStatus, UninstallResult, UninstallStatus
from skillpack.settings import SETTINGS, RuntimeSettings
from skillpack.utils.telemetry import record_event

OK_MARK = "✓"
FAIL_MARK = "✗"
WARN_MARK = "⚠"
RULE = "=" * 45

HELP_OVERVIEW = dedent(
    """
    Commands:
      - skillpack validate   - check the bundle layout before installing
      - skillpack install    - copy the bundle into the skills directory
      - skillpack uninstall  - remove an installed bundle
    """
)

logger = logging.getLogger("skillpack")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _runtime_settings(args: argparse.Namespace) -> RuntimeSettings:
    log_dir = getattr(args, "log_dir", None)
    if log_dir:
        return replace(SETTINGS, log_dir=Path(log_dir).expanduser().absolute())
    return SETTINGS


def _load_manifest(args: argparse.Namespace) -> BundleManifest:
    manifest_path = getattr(args, "manifest", None)
    if manifest_path:
        return load_manifest(Path(manifest_path).expanduser())
    return default_manifest()


def _default_bundle_dir(manifest: BundleManifest) -> Path:
    return Path.cwd() / manifest.name


def _resolve_path(value: str | None, default: Path) -> Path:
    if value:
        return Path(value).expanduser().absolute()
    return default


def _prompt_yes_no(question: str) -> bool:
    try:
        reply = input(f"{question} (y/N): ")
    except EOFError:
        print()
        return False
    return reply.strip().lower() == "y"


def _confirmation(args: argparse.Namespace, notice: str, question: str) -> ConfirmFn:
    def confirm(target: Path) -> bool:
        print(f"{WARN_MARK}  {notice}: {target}")
        if getattr(args, "yes", False):
            return True
        return _prompt_yes_no(question)

    return confirm


def exit_code_for(result: InstallResult | UninstallResult | ValidationReport) -> int:
    if isinstance(result, ValidationReport):
        return 0 if result.passed else 1
    return 0 if result.ok else 1


def _fail(message: str) -> None:
    print(f"{FAIL_MARK} {message}", file=sys.stderr)


# ----------------------------------------------------------------------
# install
# ----------------------------------------------------------------------


def _print_contents(target: Path, manifest: BundleManifest) -> None:
    report = validate_bundle(target, manifest)
    print("Bundle contents:")
    for finding in report.findings:
        if finding.kind != FindingKind.OK:
            continue
        if finding.group == "file":
            print(f"   - {finding.path}")
        elif finding.group == "directory":
            print(f"   - {finding.path}/: {finding.file_count} file(s)")


def _install_cmd(args: argparse.Namespace) -> int:
    settings = _runtime_settings(args)
    try:
        manifest = _load_manifest(args)
    except ManifestError as exc:
        _fail(str(exc))
        return 2

    source = _resolve_path(args.source, _default_bundle_dir(manifest))
    target = _resolve_path(args.target, settings.default_target(manifest.name))

    service = InstallerService(manifest)
    confirm = _confirmation(args, "Bundle already installed at", "Do you want to overwrite it?")
    result = service.install(source, target, confirm)
    record_event(
        settings,
        "install",
        {"source": str(source), **result.to_dict()},
        level="info" if result.ok else "error",
        status=result.status.value,
    )

    if result.status == InstallStatus.INSTALLED:
        print(f"{OK_MARK} Installation successful!")
        print(f"Bundle installed at: {target}")
        _print_contents(target, manifest)
    elif result.status == InstallStatus.CANCELLED:
        print(result.message)
    else:
        _fail(result.message)
    return exit_code_for(result)


# ----------------------------------------------------------------------
# uninstall
# ----------------------------------------------------------------------


def _uninstall_cmd(args: argparse.Namespace) -> int:
    settings = _runtime_settings(args)
    try:
        manifest = _load_manifest(args)
    except ManifestError as exc:
        _fail(str(exc))
        return 2

    target = _resolve_path(args.target, settings.default_target(manifest.name))
    confirm = _confirmation(args, "Bundle location", "Are you sure you want to uninstall?")
    result = UninstallerService().uninstall(target, confirm)
    record_event(
        settings,
        "uninstall",
        result.to_dict(),
        level="info" if result.ok else "error",
        status=result.status.value,
    )

    if result.ok:
        prefix = f"{OK_MARK} " if result.status == UninstallStatus.REMOVED else ""
        print(f"{prefix}{result.message}")
    else:
        _fail(result.message)
    return exit_code_for(result)


# ----------------------------------------------------------------------
# validate
# ----------------------------------------------------------------------

_GROUP_TITLES = (
    ("file", "Required files"),
    ("directory", "Required directories"),
    ("optional", "Optional files"),
)


def _format_finding(finding: ValidationFinding) -> str:
    if finding.kind == FindingKind.MISSING_REQUIRED:
        return f"   {FAIL_MARK} Missing: {finding.path}"
    if finding.kind == FindingKind.MISSING_OPTIONAL:
        return f"   {WARN_MARK}  Optional file missing: {finding.path}"
    if finding.file_count is not None:
        return f"   {OK_MARK} {finding.path} ({finding.file_count} files)"
    if finding.line_count is not None:
        return f"   {OK_MARK} {finding.path} ({finding.line_count} lines)"
    return f"   {OK_MARK} {finding.path}"


def _print_report(report: ValidationReport) -> None:
    print(f"Validating bundle at: {report.bundle_root}")
    for group, title in _GROUP_TITLES:
        findings = report.by_group(group)
        if not findings:
            continue
        print()
        print(f"{title}:")
        for finding in findings:
            print(_format_finding(finding))

    print()
    print(RULE)
    if report.passed:
        print(f"{OK_MARK} Validation passed!")
        if report.warning_count:
            print(f"{WARN_MARK}  {report.warning_count} warning(s) found (optional files missing)")
    else:
        print(f"{FAIL_MARK} Validation failed!")
        print(f"   {report.error_count} error(s) found")
        if report.warning_count:
            print(f"   {report.warning_count} warning(s) found")


def _validate_cmd(args: argparse.Namespace) -> int:
    settings = _runtime_settings(args)
    try:
        manifest = _load_manifest(args)
    except ManifestError as exc:
        _fail(str(exc))
        return 2

    bundle_root = _resolve_path(args.target, _default_bundle_dir(manifest))
    report = validate_bundle(bundle_root, manifest)
    record_event(
        settings,
        "validate",
        {"bundle_root": str(bundle_root), "errors": report.error_count, "warnings": report.warning_count},
        level="info" if report.passed else "error",
        status="passed" if report.passed else "failed",
    )

    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        return exit_code_for(report)
    if not probe.is_dir(bundle_root):
        _fail(f"Bundle directory not found: {bundle_root}")
    _print_report(report)
    return exit_code_for(report)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--manifest", help="Bundle manifest YAML (default: packaged manifest)")
    common.add_argument("--log-dir", dest="log_dir", help="Write JSONL telemetry events to this directory")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="skillpack",
        description="Validate, install and uninstall documentation bundles.",
        epilog=HELP_OVERVIEW,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    install_cmd = sub.add_parser("install", parents=[common], help="Install the bundle")
    install_cmd.add_argument("--target", help="Install directory (default: ~/.claude/skills/<bundle>)")
    install_cmd.add_argument("--source", help="Bundle source directory (default: ./<bundle>)")
    install_cmd.add_argument("-y", "--yes", action="store_true", help="Overwrite an existing install without asking")
    install_cmd.set_defaults(func=_install_cmd)

    uninstall_cmd = sub.add_parser("uninstall", parents=[common], help="Remove an installed bundle")
    uninstall_cmd.add_argument("--target", help="Install directory (default: ~/.claude/skills/<bundle>)")
    uninstall_cmd.add_argument("-y", "--yes", action="store_true", help="Remove without asking")
    uninstall_cmd.set_defaults(func=_uninstall_cmd)

    validate_cmd = sub.add_parser("validate", parents=[common], help="Validate the bundle layout")
    validate_cmd.add_argument("--target", help="Bundle directory to validate (default: ./<bundle>)")
    validate_cmd.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    validate_cmd.set_defaults(func=_validate_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(getattr(args, "verbose", False))
    logger.debug("skillpack %s: %s", __version__, args.command)
    return args.func(args)


def install_main() -> int:
    return main(["install", *sys.argv[1:]])


def uninstall_main() -> int:
    return main(["uninstall", *sys.argv[1:]])


def validate_main() -> int:
    return main(["validate", *sys.argv[1:]])


if __name__ == "__main__":
    sys.exit(main())
