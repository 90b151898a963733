"""Read-only filesystem probes that never raise."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def exists(path: Path) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def lexists(path: Path) -> bool:
    """Like :func:`exists` but true for a dangling symlink."""
    try:
        os.lstat(path)
    except (OSError, ValueError):
        return False
    return True


def is_file(path: Path) -> bool:
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def is_dir(path: Path) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def count_files(directory: Path) -> int:
    """Count regular files below ``directory``; symlinks are not followed."""
    if not is_dir(directory):
        return 0

    def _skip(exc: OSError) -> None:
        logger.debug("skipping unreadable path %s: %s", exc.filename, exc)

    total = 0
    for dirpath, _dirnames, filenames in os.walk(directory, onerror=_skip):
        for filename in filenames:
            try:
                mode = os.lstat(os.path.join(dirpath, filename)).st_mode
            except OSError:
                continue
            if stat.S_ISREG(mode):
                total += 1
    return total


def count_lines(path: Path) -> int | None:
    """Count newline characters like ``wc -l``; ``None`` when unreadable."""
    if not is_file(path):
        return None
    lines = 0
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(64 * 1024), b""):
                lines += chunk.count(b"\n")
    except OSError as exc:
        logger.debug("cannot read %s: %s", path, exc)
        return None
    return lines


__all__ = ["exists", "lexists", "is_file", "is_dir", "count_files", "count_lines"]
