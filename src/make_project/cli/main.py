#!/usr/bin/env python3
"""Entry point for the make-project CLI."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, NoReturn, Sequence

from make_project import __version__
from make_project.adapters.fs_template_repo import FSTemplateRepository
from make_project.app.bootstrap_service import BootstrapService
from make_project.app.script_service import ScriptService
from make_project.domain.project import ProjectConfig, resolve_destination
from make_project.domain.template import TemplateCatalog
from make_project.settings import RuntimeSettings, load_settings
from make_project.utils.telemetry import record_project_created

PROG = "make-project"

SETTINGS: RuntimeSettings | None = None


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser reporting usage errors as ``error: ...`` with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"error: {message}\n")


def _invalid_choice(value: str, choices: Sequence[str]) -> str:
    valid = ", ".join(repr(choice) for choice in choices) or "<none>"
    return f"invalid choice: {value!r} (choose from {valid})"


def _script_list(choices: Sequence[str]) -> Callable[[str], list[str]]:
    def parse(value: str) -> list[str]:
        names = value.split(",")
        for name in names:
            if name not in choices:
                raise argparse.ArgumentTypeError(_invalid_choice(name, choices))
        return names

    return parse


def build_parser(catalog: TemplateCatalog) -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, description="a personalized project initializer.")
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    parser.add_argument(
        "-l",
        "--license",
        choices=catalog.licenses,
        metavar="LICENSE",
        help=f"license copied to LICENSE.md ({', '.join(catalog.licenses) or 'none available'})",
    )
    parser.add_argument(
        "-s",
        "--scripts",
        type=_script_list(catalog.scripts),
        action="extend",
        metavar="SCRIPT[,SCRIPT...]",
        help=f"setup scripts run in order inside the project ({', '.join(catalog.scripts) or 'none available'})",
    )
    parser.add_argument("flake", choices=catalog.flakes, metavar="flake", help="nix flake template")
    parser.add_argument("path", help="directory to place project in")
    return parser


def _error(message: object) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def _build_services(settings: RuntimeSettings) -> tuple[FSTemplateRepository, BootstrapService]:
    template_repo = FSTemplateRepository(settings.template_dir)
    scripts = ScriptService(template_repo, settings)
    return template_repo, BootstrapService(template_repo, scripts)


def _resolve_config(args: argparse.Namespace) -> ProjectConfig:
    return ProjectConfig(
        flake=args.flake,
        path=resolve_destination(args.path),
        license=args.license,
        scripts=tuple(args.scripts or ()),
    )


def _elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000.0


def main(argv: list[str] | None = None) -> int:
    try:
        settings = SETTINGS if SETTINGS is not None else load_settings()
        template_repo, bootstrap = _build_services(settings)
        catalog = template_repo.catalog()
    except (RuntimeError, OSError) as exc:
        return _error(exc)

    parser = build_parser(catalog)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    config = _resolve_config(args)

    started = time.monotonic()
    try:
        bootstrap.bootstrap(config)
    except (RuntimeError, OSError) as exc:
        record_project_created(settings, config, duration_ms=_elapsed_ms(started), error=exc)
        return _error(exc)
    record_project_created(settings, config, duration_ms=_elapsed_ms(started))
    print(f"Project created at {config.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
