"""Structured JSONL events (opt-in via a log directory)."""

from __future__ import annotations

import json
import logging
import time
from functools import lru_cache
from typing import Any

from jsonschema import Draft202012Validator

from skillpack.resources import load_schema
from skillpack.settings import RuntimeSettings

logger = logging.getLogger(__name__)

LEVELS = {"info", "warn", "error"}
LOG_FILENAME = "telemetry.jsonl"


def record_event(
    settings: RuntimeSettings,
    event: str,
    payload: dict[str, Any] | None = None,
    *,
    level: str = "info",
    status: str | None = None,
) -> None:
    """Append one event to ``<log_dir>/telemetry.jsonl``.

    Events are dropped when no log directory is configured. A log directory
    that cannot be written is reported as a warning; the command outcome is
    never affected by it.
    """
    log_dir = settings.log_dir
    if log_dir is None:
        return
    record: dict[str, Any] = {
        "ts": time.time(),
        "event": event,
        "payload": payload or {},
        "level": level,
        "version": settings.cli_version,
    }
    if status:
        record["status"] = status
    _validate_record(record)
    _telemetry_validator().validate(record)
    log_path = log_dir / LOG_FILENAME
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError as exc:
        logger.warning("cannot write telemetry to %s: %s", log_path, exc)


def _validate_record(record: dict[str, Any]) -> None:
    if not isinstance(record.get("event"), str) or not record["event"].strip():
        raise ValueError("Telemetry event must have non-empty string 'event'")
    if not isinstance(record.get("payload"), dict):
        raise ValueError("Telemetry payload must be a dict")
    level = record.get("level", "info")
    if level not in LEVELS:
        raise ValueError(f"Telemetry level '{level}' is not supported")


@lru_cache(maxsize=1)
def _telemetry_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema("telemetry.schema.json"))


__all__ = ["record_event", "LOG_FILENAME"]
