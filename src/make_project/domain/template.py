"""Domain model for the template root and its discovered entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TemplateKind(str, Enum):
    FLAKE = "flakes"
    LICENSE = "licenses"
    SCRIPT = "scripts"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def subdir(self) -> str:
        return self.value


_EXTENSIONS = {
    TemplateKind.FLAKE: "nix",
    TemplateKind.LICENSE: "md",
    TemplateKind.SCRIPT: "sh",
}


def template_file(root: Path, kind: TemplateKind, name: str) -> Path:
    """Location of ``<root>/<subdir>/<name>.<ext>``."""

    return root / kind.subdir / f"{name}.{kind.extension}"


@dataclass(frozen=True)
class TemplateCatalog:
    """Logical template names discovered under the template root."""

    flakes: tuple[str, ...]
    licenses: tuple[str, ...]
    scripts: tuple[str, ...]
