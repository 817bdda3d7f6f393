from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_json(data) -> None:
    console.print_json(data=data)


def out(text: str) -> None:
    """Write a plain value to stdout, markup is not interpreted."""
    console.print(text, markup=False)


def info(msg: str) -> None:
    err_console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    err_console.print(f"[bold green]OK[/] {escape(msg)}")


def warn(msg: str) -> None:
    err_console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    err_console.print(f"[bold red]ERR[/] {escape(msg)}")
