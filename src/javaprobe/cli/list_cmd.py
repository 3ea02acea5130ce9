"""``javaprobe list`` — Discover and probe Java runtimes.

Exit Codes:
    0 — At least one usable Java runtime was found.
    2 — No Java runtime was found, or the helper jar is missing.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from javaprobe.cli.output import debug_to_stderr, install_to_dict, print_installs
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.pipeline import JavaDiscovery
from javaprobe.exceptions import HelperJarMissingError


@click.command("list")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--helper-jar",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Version-printing helper jar (default: javaprobe/java/PrintJavaVersion.jar).",
)
@click.option("--debug", is_flag=True, default=False, help="Print discovery diagnostics to stderr.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def list_command(
    output_format: str,
    helper_jar: Path | None,
    debug: bool,
    verbose: bool,
) -> None:
    """Find the Java runtimes on this machine.

    Each executable candidate is run once with the helper jar; candidates
    that fail or take longer than one second are left out.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = DiscoveryConfig(
        helper_jar=helper_jar,
        debug_sink=debug_to_stderr if debug else None,
    )
    try:
        installs = asyncio.run(JavaDiscovery(config).discover())
    except HelperJarMissingError as exc:
        raise click.UsageError(f"{exc}. Pass --helper-jar to use another jar.") from exc

    if output_format == "json":
        click.echo(json.dumps([install_to_dict(i) for i in installs], indent=2))
    else:
        print_installs(installs)

    sys.exit(0 if installs else 2)
