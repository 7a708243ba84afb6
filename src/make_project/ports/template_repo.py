"""Port definitions for template storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from make_project.domain.template import TemplateCatalog, TemplateKind


class TemplateDiscoveryError(RuntimeError):
    pass


class TemplateRepository(ABC):
    @abstractmethod
    def list_names(self, kind: TemplateKind) -> Iterable[str]:
        """Return logical names (file stems) of templates of the given kind."""

    @abstractmethod
    def template_path(self, kind: TemplateKind, name: str) -> Path:
        """Return the file backing template ``name`` of the given kind."""

    @abstractmethod
    def catalog(self) -> TemplateCatalog:
        """Discover every template kind at once."""
