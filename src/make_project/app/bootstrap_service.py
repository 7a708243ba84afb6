"""Application service that materialises a new project directory."""

from __future__ import annotations

import shutil
from pathlib import Path

from make_project.app.script_service import ScriptService
from make_project.domain.project import ProjectConfig
from make_project.domain.template import TemplateKind
from make_project.ports.template_repo import TemplateRepository


class BootstrapService:
    """Create the destination, copy templates, then run setup scripts.

    Every step stops the pipeline on failure; nothing already written is
    removed.
    """

    def __init__(self, template_repo: TemplateRepository, scripts: ScriptService) -> None:
        self._templates = template_repo
        self._scripts = scripts

    def bootstrap(self, config: ProjectConfig) -> None:
        config.ensure_destination_free()
        config.path.mkdir(parents=True)

        if config.license is not None:
            self._copy_file(
                self._templates.template_path(TemplateKind.LICENSE, config.license),
                config.license_path,
            )
        self._copy_file(
            self._templates.template_path(TemplateKind.FLAKE, config.flake),
            config.flake_path,
        )
        self._scripts.run_all(config)

    def _copy_file(self, source: Path, destination: Path) -> None:
        shutil.copyfile(source, destination)
