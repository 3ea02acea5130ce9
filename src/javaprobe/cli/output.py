"""Rich output formatting helpers for the javaprobe CLI."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from javaprobe.core.install import Architecture, JavaInstall

_ARCH_STYLES: dict[Architecture, str] = {
    Architecture.X64: "green",
    Architecture.X86: "yellow",
    Architecture.UNKNOWN: "dim",
}

console = Console()


def install_to_dict(install: JavaInstall) -> dict[str, Any]:
    """JSON-serializable view of a resolved install."""
    version = install.version
    return {
        "path": install.path,
        "architecture": install.architecture.value if install.architecture else None,
        "version": str(version) if version else None,
        "major": version.major if version else None,
        "minor": version.minor if version else None,
        "patch": version.patch if version else None,
        "update": version.update if version else None,
    }


def print_installs(installs: list[JavaInstall]) -> None:
    """Print a table of discovered runtimes, newest version first."""
    if not installs:
        console.print("[dim]No Java runtimes found.[/dim]")
        return

    table = Table(title="Java Runtimes", show_header=True, header_style="bold")
    table.add_column("Path", style="bold", overflow="fold")
    table.add_column("Version", justify="right")
    table.add_column("Arch", justify="center")

    for install in sorted(installs, key=lambda i: i.version, reverse=True):
        arch = install.architecture or Architecture.UNKNOWN
        table.add_row(
            install.path,
            str(install.version),
            Text(arch.value, style=_ARCH_STYLES[arch]),
        )

    console.print(table)
    console.print(f"[bold]{len(installs)}[/bold] runtime(s) found")


def print_candidates(rows: list[tuple[str, bool]]) -> None:
    """Print candidate paths with their executable flag."""
    table = Table(title="Candidate Paths", show_header=True, header_style="bold")
    table.add_column("Path", overflow="fold")
    table.add_column("Executable", justify="center")
    for path, ok in rows:
        marker = Text("yes", style="green") if ok else Text("no", style="dim")
        table.add_row(path, marker)
    console.print(table)


def debug_to_stderr(message: str) -> None:
    """Debug sink that writes diagnostic lines to stderr."""
    click.echo(f"[debug] {message}", err=True)
