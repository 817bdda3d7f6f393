from __future__ import annotations

from typer.testing import CliRunner

from semrange_cli import config, main

runner = CliRunner()


def test_settings_init_writes_defaults(tmp_path) -> None:
    result = runner.invoke(main.app, ["settings", "init"])
    assert result.exit_code == 0
    assert tmp_path.joinpath("config.toml").exists()

    again = runner.invoke(main.app, ["settings", "init"])
    assert again.exit_code == 0
    assert "Use --force to overwrite." in again.output


def test_settings_set_and_get() -> None:
    result = runner.invoke(main.app, ["settings", "set", "--log-level", "ERROR", "--upgrade-steps", "1.0.0, 1.5.0 2"])
    assert result.exit_code == 0

    cfg = config.load_config()
    assert cfg.log_level == "error"
    assert cfg.upgrade_steps == ["1.0.0", "1.5.0", "2"]

    assert runner.invoke(main.app, ["settings", "get", "log_level"]).output.strip() == "error"
    assert runner.invoke(main.app, ["settings", "get", "upgrade_steps"]).output.strip() == "1.0.0 1.5.0 2"


def test_settings_show_defaults() -> None:
    result = runner.invoke(main.app, ["settings", "show"])
    assert result.exit_code == 0
    assert "log_level=warn (default) upgrade_steps=(empty)" in result.output


def test_settings_set_rejects_bad_values() -> None:
    result = runner.invoke(main.app, ["settings", "set", "--log-level", "loud"])
    assert result.exit_code == 2
    assert "Unknown log level" in result.output

    result = runner.invoke(main.app, ["settings", "set", "--upgrade-steps", "1.0.0 soon"])
    assert result.exit_code == 2
    assert "Not a version: soon" in result.output


def test_settings_get_unknown_key() -> None:
    result = runner.invoke(main.app, ["settings", "get", "colour"])
    assert result.exit_code == 2
    assert "Unknown setting: colour" in result.output


def test_settings_with_broken_config_reports_once(tmp_path) -> None:
    tmp_path.joinpath("config.toml").write_text("log_level = \n", encoding="utf-8")

    result = runner.invoke(main.app, ["settings", "set", "--log-level", "info"])
    assert result.exit_code == 2
    assert result.output.count("Invalid config file") == 1
    assert "using defaults" not in result.output

    result = runner.invoke(main.app, ["settings", "init", "--force"])
    assert result.exit_code == 0
    assert "using defaults" not in result.output
    assert config.load_config().log_level is None
