from __future__ import annotations

import os

import typer

from semrange import split_versions

from .. import console
from ..config import (
    LOG_LEVEL_DEFAULT,
    ConfigError,
    config_path,
    default_config,
    load_config,
    normalize_log_level,
    normalize_upgrade_steps,
    save_config,
)

app = typer.Typer(help="Manage local settings (config.toml in the user config dir).")


def _load():
    try:
        return load_config()
    except ConfigError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    saved = save_config(default_config())
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = _load()
    steps = " ".join(cfg.upgrade_steps) or "(empty)"
    level = cfg.log_level or f"{LOG_LEVEL_DEFAULT} (default)"
    console.out(f"log_level={level} upgrade_steps={steps}")


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (log_level, upgrade_steps)."),
):
    cfg = _load()
    k = key.strip().lower()
    if k == "log_level":
        console.out(cfg.log_level or LOG_LEVEL_DEFAULT)
        return
    if k == "upgrade_steps":
        console.out(" ".join(cfg.upgrade_steps))
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        log_level: str | None = typer.Option(None, "--log-level", help="trace, debug, info, warn, error or fatal."),
        upgrade_steps: str | None = typer.Option(
            None,
            "--upgrade-steps",
            help="Ascending upgrade steps separated by spaces or commas.",
        ),
):
    cfg = _load()
    try:
        if log_level is not None:
            cfg.log_level = normalize_log_level(log_level)
        if upgrade_steps is not None:
            cfg.upgrade_steps = normalize_upgrade_steps(split_versions(upgrade_steps))
    except ConfigError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
