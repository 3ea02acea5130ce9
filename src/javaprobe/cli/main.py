"""javaprobe CLI: find the Java runtimes installed on this machine.

Entry point for the ``javaprobe`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list       — Discover, probe and list usable Java runtimes.
    candidates — Show the raw candidate paths for this platform.

Usage::

    javaprobe list
    javaprobe list --format json
    javaprobe list --helper-jar ./PrintJavaVersion.jar --debug
    javaprobe candidates
"""

from __future__ import annotations

import click

from javaprobe import __version__
from javaprobe.cli.candidates_cmd import candidates_command
from javaprobe.cli.list_cmd import list_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """javaprobe: Discover Java runtimes and report their version and architecture.

    Checks the well-known install locations for this operating system,
    runs each executable candidate once with a small helper jar, and
    reports the ones that respond.
    """


cli.add_command(list_command)
cli.add_command(candidates_command)
