"""Runtime settings for make-project."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

CONFIG_FILE = "config.yaml"
_CONFIG_KEYS = {"template_dir", "telemetry"}
_DISABLE_VALUES = {"0", "false", "no", "off"}


class SettingsError(RuntimeError):
    """Raised when the user configuration cannot be loaded."""


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    template_dir: Path
    log_dir: Path
    telemetry: bool = True

    @property
    def config_file(self) -> Path:
        return self.home_dir / CONFIG_FILE

    @property
    def telemetry_file(self) -> Path:
        return self.log_dir / "telemetry.jsonl"


def _default_home_dir(environ: Mapping[str, str]) -> Path:
    override = environ.get("MAKE_PROJECT_HOME", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".make-project"


def executable_dir(executable: str | None = None) -> Path:
    """Directory holding the running executable (``sys.argv[0]``)."""

    target = executable if executable is not None else sys.argv[0]
    return Path(target).expanduser().resolve().parent


def _load_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text("utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise SettingsError(f"failed to read config file '{path}': {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"config file '{path}' must contain a mapping")
    unknown = sorted(str(key) for key in data if key not in _CONFIG_KEYS)
    if unknown:
        raise SettingsError(f"unknown keys in config file '{path}': {', '.join(unknown)}")
    template_dir = data.get("template_dir")
    if template_dir is not None and not isinstance(template_dir, str):
        raise SettingsError(f"'template_dir' in '{path}' must be a string")
    telemetry = data.get("telemetry")
    if telemetry is not None and not isinstance(telemetry, bool):
        raise SettingsError(f"'telemetry' in '{path}' must be true or false")
    return data


def load_settings(
    environ: Mapping[str, str] | None = None,
    executable: str | None = None,
) -> RuntimeSettings:
    env = os.environ if environ is None else environ
    home = _default_home_dir(env)
    config_path = home / CONFIG_FILE
    config = _load_config(config_path)

    template_override = env.get("MAKE_PROJECT_TEMPLATE_DIR", "").strip()
    if template_override:
        template_dir = Path(template_override).expanduser()
    elif config.get("template_dir"):
        template_dir = config_path.parent / Path(config["template_dir"]).expanduser()
    else:
        template_dir = executable_dir(executable) / "templates"

    telemetry_env = env.get("MAKE_PROJECT_TELEMETRY")
    if telemetry_env is not None and telemetry_env.strip():
        telemetry = telemetry_env.strip().lower() not in _DISABLE_VALUES
    else:
        telemetry = config.get("telemetry", True)

    return RuntimeSettings(
        home_dir=home,
        template_dir=template_dir.absolute(),
        log_dir=home / "logs",
        telemetry=telemetry,
    )
