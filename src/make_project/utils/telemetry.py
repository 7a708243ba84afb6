"""Event log of created projects and the setup scripts run in them.

Records are appended to ``<log_dir>/telemetry.jsonl``. Writing the log never
decides the outcome of a run: a record that cannot be written is reported as
a warning on stderr and dropped.
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any

import jsonschema

from make_project.domain.project import ProjectConfig
from make_project.resources import load_telemetry_schema
from make_project.settings import RuntimeSettings

_TELEMETRY_VALIDATOR: jsonschema.Draft202012Validator | None = None


def record_project_created(
    settings: RuntimeSettings,
    config: ProjectConfig,
    *,
    duration_ms: float,
    error: BaseException | None = None,
) -> None:
    record: dict[str, Any] = {
        "event": "project.create",
        "status": "ok" if error is None else "error",
        "project": str(config.path),
        "flake": config.flake,
        "license": config.license,
        "scripts": list(config.scripts),
        "durationMs": max(duration_ms, 0.0),
    }
    if error is not None:
        record["error"] = str(error)
    _append(settings, record)


def record_script_run(settings: RuntimeSettings, name: str, config: ProjectConfig, returncode: int) -> None:
    _append(
        settings,
        {
            "event": "project.script",
            "status": "ok" if returncode == 0 else "error",
            "project": str(config.path),
            "script": name,
            "exitCode": returncode,
        },
    )


def _append(settings: RuntimeSettings, record: dict[str, Any]) -> None:
    if not settings.telemetry:
        return
    record["ts"] = time.time()
    log_path = settings.telemetry_file
    try:
        _telemetry_validator().validate(record)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except (OSError, jsonschema.ValidationError) as exc:
        reason = exc.message if isinstance(exc, jsonschema.ValidationError) else exc
        print(f"warning: {record['event']} event not written to '{log_path}': {reason}", file=sys.stderr)


def _telemetry_validator() -> jsonschema.Draft202012Validator:
    global _TELEMETRY_VALIDATOR
    if _TELEMETRY_VALIDATOR is None:
        _TELEMETRY_VALIDATOR = jsonschema.Draft202012Validator(load_telemetry_schema())
    return _TELEMETRY_VALIDATOR
