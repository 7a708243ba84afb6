from __future__ import annotations

from pathlib import Path

import pytest

from make_project.settings import SettingsError, executable_dir, load_settings


def test_defaults_resolve_template_dir_beside_executable(tmp_path: Path) -> None:
    exe = tmp_path / "bin" / "make-project"
    settings = load_settings({"MAKE_PROJECT_HOME": str(tmp_path / "home")}, executable=str(exe))

    assert settings.home_dir == tmp_path / "home"
    assert settings.template_dir == (tmp_path / "bin").resolve() / "templates"
    assert settings.log_dir == tmp_path / "home" / "logs"
    assert settings.config_file == tmp_path / "home" / "config.yaml"
    assert settings.telemetry is True


def test_executable_dir_defaults_to_argv0(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("sys.argv", [str(tmp_path / "tool" / "make-project")])
    assert executable_dir() == (tmp_path / "tool").resolve()


def test_config_file_sets_template_dir_and_telemetry(tmp_path: Path) -> None:
    home = tmp_path / "home"
    home.mkdir()
    (home / "config.yaml").write_text("template_dir: my-templates\ntelemetry: false\n", encoding="utf-8")

    settings = load_settings({"MAKE_PROJECT_HOME": str(home)}, executable=str(tmp_path / "exe"))

    assert settings.template_dir == home / "my-templates"
    assert settings.telemetry is False


def test_environment_overrides_config(tmp_path: Path) -> None:
    home = tmp_path / "home"
    home.mkdir()
    (home / "config.yaml").write_text("template_dir: ignored\ntelemetry: false\n", encoding="utf-8")
    env = {
        "MAKE_PROJECT_HOME": str(home),
        "MAKE_PROJECT_TEMPLATE_DIR": str(tmp_path / "override"),
        "MAKE_PROJECT_TELEMETRY": "1",
    }

    settings = load_settings(env, executable=str(tmp_path / "exe"))

    assert settings.template_dir == tmp_path / "override"
    assert settings.telemetry is True


def test_empty_config_is_accepted(tmp_path: Path) -> None:
    home = tmp_path / "home"
    home.mkdir()
    (home / "config.yaml").write_text("", encoding="utf-8")

    settings = load_settings({"MAKE_PROJECT_HOME": str(home)}, executable=str(tmp_path / "exe"))

    assert settings.telemetry is True


@pytest.mark.parametrize(
    "content, message",
    [
        ("- a\n- b\n", "must contain a mapping"),
        ("colour: blue\n", "unknown keys"),
        ("template_dir: 3\n", "must be a string"),
        ("telemetry: maybe\n", "must be true or false"),
        ("template_dir: [unclosed\n", "failed to read config file"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str, message: str) -> None:
    home = tmp_path / "home"
    home.mkdir()
    (home / "config.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(SettingsError, match=message):
        load_settings({"MAKE_PROJECT_HOME": str(home)}, executable=str(tmp_path / "exe"))


@pytest.mark.parametrize("value", ["0", "false", "No", " off "])
def test_telemetry_env_disables_over_config(tmp_path: Path, value: str) -> None:
    home = tmp_path / "home"
    home.mkdir()
    (home / "config.yaml").write_text("telemetry: true\n", encoding="utf-8")

    settings = load_settings(
        {"MAKE_PROJECT_HOME": str(home), "MAKE_PROJECT_TELEMETRY": value},
        executable=str(tmp_path / "exe"),
    )

    assert settings.telemetry is False
