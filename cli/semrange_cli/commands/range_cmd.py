from __future__ import annotations

import logging

import typer

from semrange import parse, satisfies as range_satisfies
from semrange import split_versions, upgrade_list

from .. import console
from ..config import ConfigError, load_config
from ..inputs import read_inputs

log = logging.getLogger(__name__)


def satisfies(
        version: str = typer.Argument(..., help="Candidate version."),
        range_words: list[str] = typer.Argument(..., metavar="RANGE...", help="Range, e.g. '>=1.0.0 <2.0.0 || >=3.0.0'."),
        quiet: bool = typer.Option(False, "-q", "--quiet", help="No output, exit code only."),
):
    """
    Exit 0 when VERSION satisfies RANGE, 1 otherwise.
    """
    if parse(version) is None:
        console.err(f"Invalid version: {version}")
        raise typer.Exit(code=1)

    range_expr = " ".join(range_words)
    matched = range_satisfies(version, range_expr)
    log.debug("satisfies %s %r -> %s", version, range_expr, matched)
    if not quiet:
        console.out("true" if matched else "false")
    if not matched:
        raise typer.Exit(code=1)


def upgrades(
        maximum: str = typer.Argument(..., help="Highest version to upgrade to."),
        versions: list[str] | None = typer.Argument(
            None,
            help="Ascending upgrade steps (default: configured upgrade_steps, then stdin).",
        ),
):
    """
    Print the upgrade steps up to and including MAXIMUM.
    """
    steps = [v for item in versions or [] for v in split_versions(item)]
    if not steps:
        try:
            steps = list(load_config().upgrade_steps)
        except ConfigError as exc:
            console.err(str(exc))
            raise typer.Exit(code=2)
    if not steps:
        steps = [v for line in read_inputs(None) for v in split_versions(line)]

    required = upgrade_list(steps, maximum)
    if required is None:
        console.err(f"Invalid version: {maximum}")
        raise typer.Exit(code=1)
    log.debug("upgrade steps %s up to %s -> %s", steps, maximum, required)
    console.out(" ".join(required))
