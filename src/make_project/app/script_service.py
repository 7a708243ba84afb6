"""Execution of setup scripts inside a freshly created project."""

from __future__ import annotations

import shutil
import subprocess
import sys
from typing import IO

from make_project.domain.project import ProjectConfig
from make_project.domain.template import TemplateKind
from make_project.ports.template_repo import TemplateRepository
from make_project.settings import RuntimeSettings
from make_project.utils.telemetry import record_script_run

SHELL = "sh"


class ScriptError(RuntimeError):
    pass


class ScriptLaunchError(ScriptError):
    pass


class ScriptFailedError(ScriptError):
    def __init__(self, name: str, returncode: int) -> None:
        super().__init__(f"script `{name}` failed")
        self.name = name
        self.returncode = returncode


class ScriptService:
    def __init__(
        self,
        template_repo: TemplateRepository,
        settings: RuntimeSettings,
        *,
        stdout: IO[str] | None = None,
    ) -> None:
        self._templates = template_repo
        self._settings = settings
        self._stdout = stdout

    def run_all(self, config: ProjectConfig) -> None:
        """Run the configured scripts one after another, stopping at the first failure."""

        for name in config.scripts:
            self.run(name, config)

    def run(self, name: str, config: ProjectConfig) -> None:
        out = self._stdout or sys.stdout
        script = self._templates.template_path(TemplateKind.SCRIPT, name).absolute()
        shell = shutil.which(SHELL)
        if shell is None:
            raise ScriptLaunchError(f"failed to run script `{name}`: `{SHELL}` not found on PATH")

        print(f"running script `{name}`", file=out, flush=True)
        try:
            proc = subprocess.Popen(
                [shell, str(script)],
                cwd=config.path,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise ScriptLaunchError(f"failed to run script `{name}`: {exc}") from exc

        with proc:
            assert proc.stdin is not None and proc.stdout is not None
            # scripts get no input; closing stdin turns any read into EOF
            proc.stdin.close()
            for line in proc.stdout:
                out.write(line)
                out.flush()
            returncode = proc.wait()

        record_script_run(self._settings, name, config, returncode)
        if returncode != 0:
            raise ScriptFailedError(name, returncode)
