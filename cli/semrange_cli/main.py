from __future__ import annotations

import os

import typer

from . import console
from .commands import range_cmd, settings_cmd, version_cmd
from .config import ENV_LOG_LEVEL, ConfigError, load_config, resolve_log_level
from .logging_ import setup_logging


def _configured_log_level() -> str | None:
    try:
        cfg = load_config()
    except ConfigError as exc:
        console.warn(f"{exc} (using defaults)")
        return None
    return resolve_log_level(cfg)


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="semrange",
        help="Validate, clean, compare and range-match semantic versions.",
        no_args_is_help=True,
    )

    app.command("valid")(version_cmd.valid)
    app.command("clean")(version_cmd.clean)
    app.command("compare")(version_cmd.compare)
    app.command("satisfies")(range_cmd.satisfies)
    app.command("upgrades")(range_cmd.upgrades)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            log_level: str | None = typer.Option(None, "--log-level", help="trace, debug, info, warn, error or fatal."),
    ):
        if ctx.invoked_subcommand == "settings":
            # settings commands report config problems themselves
            setup_logging(verbose, log_level, os.getenv(ENV_LOG_LEVEL))
            return
        setup_logging(verbose, log_level, _configured_log_level())

    return app


app = _build_app()
