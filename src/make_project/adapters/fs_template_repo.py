"""Filesystem-backed template repository."""

from __future__ import annotations

from pathlib import Path

from make_project.domain.template import TemplateCatalog, TemplateKind, template_file
from make_project.ports.template_repo import TemplateDiscoveryError, TemplateRepository


class FSTemplateRepository(TemplateRepository):
    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir

    def ensure_available(self) -> None:
        if not self._base_dir.is_dir():
            raise TemplateDiscoveryError(f"template directory '{self._base_dir}' does not exist")

    def list_names(self, kind: TemplateKind) -> list[str]:
        subdir = self._base_dir / kind.subdir
        try:
            entries = list(subdir.iterdir())
        except OSError as exc:
            raise TemplateDiscoveryError(
                f"failed to read template subdirectory '{subdir}': {exc.strerror or exc}"
            ) from exc

        names: set[str] = set()
        for entry in entries:
            try:
                entry.stat()
            except OSError as exc:
                raise TemplateDiscoveryError(
                    f"failed to read entry in template subdirectory '{kind.subdir}': {exc.strerror or exc}"
                ) from exc
            stem = entry.stem
            try:
                stem.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise TemplateDiscoveryError(
                    f"filename {entry.name!r} in '{kind.subdir}' could not be converted to unicode"
                ) from exc
            names.add(stem)
        return sorted(names)

    def template_path(self, kind: TemplateKind, name: str) -> Path:
        return template_file(self._base_dir, kind, name)

    def catalog(self) -> TemplateCatalog:
        self.ensure_available()
        return TemplateCatalog(
            flakes=tuple(self.list_names(TemplateKind.FLAKE)),
            licenses=tuple(self.list_names(TemplateKind.LICENSE)),
            scripts=tuple(self.list_names(TemplateKind.SCRIPT)),
        )
