from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
SANDBOX_HOME = ROOT / ".test_place" / "global-home"
os.environ.setdefault("MAKE_PROJECT_HOME", str(SANDBOX_HOME))
SANDBOX_HOME.mkdir(parents=True, exist_ok=True)
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from make_project.settings import RuntimeSettings  # noqa: E402


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    for subdir in ("flakes", "licenses", "scripts"):
        (root / subdir).mkdir(parents=True)
    (root / "flakes" / "rust.nix").write_text("{ description = \"rust\"; }\n", encoding="utf-8")
    (root / "flakes" / "python.nix").write_text("{ description = \"python\"; }\n", encoding="utf-8")
    (root / "licenses" / "mit.md").write_text("MIT License\n", encoding="utf-8")
    (root / "scripts" / "init.sh").write_text("echo hello > marker.txt\n", encoding="utf-8")
    return root


@pytest.fixture()
def runtime_settings(tmp_path: Path, template_root: Path) -> RuntimeSettings:
    base = tmp_path / "runtime"
    home = base / "home"
    log_dir = base / "logs"
    for directory in (home, log_dir):
        directory.mkdir(parents=True, exist_ok=True)
    return RuntimeSettings(home_dir=home, template_dir=template_root, log_dir=log_dir)
