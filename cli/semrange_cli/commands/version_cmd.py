from __future__ import annotations

import typer

from semrange import clean as clean_version
from semrange import compare as compare_versions
from semrange import validate

from .. import console
from ..inputs import read_inputs


def valid(
        versions: list[str] | None = typer.Argument(None, help="Versions to validate (default: read stdin)."),
        as_json: bool = typer.Option(False, "--json", help="Print the parsed components as JSON."),
):
    """
    Check that each version is a strict MAJOR.MINOR.PATCH[-PRE][+BUILD].
    """
    items = read_inputs(versions)
    if not items:
        console.err("No version given.")
        raise typer.Exit(code=2)

    failed = False
    for text in items:
        parsed = validate(text)
        if parsed is None:
            console.err(f"Invalid version: {text}")
            failed = True
            continue
        if as_json:
            console.print_json(parsed.as_dict())
        else:
            console.out(str(parsed))
    if failed:
        raise typer.Exit(code=1)


def clean(
        versions: list[str] | None = typer.Argument(None, help="Versions to clean (default: read stdin)."),
):
    """
    Normalize partial versions: 1.x -> 1.0.0, v2 -> 2.0.0.
    """
    items = read_inputs(versions)
    if not items:
        console.err("No version given.")
        raise typer.Exit(code=2)

    failed = False
    for text in items:
        cleaned = clean_version(text)
        if cleaned is None:
            console.err(f"Invalid version: {text}")
            failed = True
            continue
        console.out(cleaned)
    if failed:
        raise typer.Exit(code=1)


def compare(
        first: str = typer.Argument(..., help="Left version."),
        second: str = typer.Argument(..., help="Right version."),
):
    """
    Print -1, 0 or 1 as FIRST is lower than, equal to or greater than SECOND.
    """
    result = compare_versions(first, second)
    if result is None:
        bad = first if clean_version(first) is None else second
        console.err(f"Invalid version: {bad}")
        raise typer.Exit(code=1)
    console.out(str(result))
