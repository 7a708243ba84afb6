"""Domain model for a project about to be created."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

FLAKE_FILE = "flake.nix"
LICENSE_FILE = "LICENSE.md"


class DestinationExistsError(RuntimeError):
    """Raised when the destination path is already taken."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"destination '{path}' already exists")
        self.path = path


def resolve_destination(path: str | Path, cwd: Path | None = None) -> Path:
    """Absolute destination path; relative paths are joined onto ``cwd``."""

    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    base = cwd if cwd is not None else Path.cwd()
    return base / candidate


@dataclass(frozen=True)
class ProjectConfig:
    flake: str
    path: Path
    license: str | None = None
    scripts: tuple[str, ...] = field(default_factory=tuple)

    @property
    def flake_path(self) -> Path:
        return self.path / FLAKE_FILE

    @property
    def license_path(self) -> Path:
        return self.path / LICENSE_FILE

    def ensure_destination_free(self) -> None:
        if self.path.exists() or self.path.is_symlink():
            raise DestinationExistsError(self.path)
