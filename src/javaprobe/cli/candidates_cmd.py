"""``javaprobe candidates`` — Show raw candidate paths without probing.

Useful for checking which locations are considered on this platform and
which of them are executable.

Exit Codes:
    0 — Always (informational command).
"""

from __future__ import annotations

import asyncio
import json

import click

from javaprobe.cli.output import debug_to_stderr, print_candidates
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.pipeline import JavaDiscovery, dedupe


async def _collect(discovery: JavaDiscovery) -> list[tuple[str, bool]]:
    candidates = dedupe(await discovery.candidates())
    executable = {c.path for c in await discovery.executable(candidates)}
    return [(c.path, c.path in executable) for c in candidates]


@click.command("candidates")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option("--debug", is_flag=True, default=False, help="Print discovery diagnostics to stderr.")
def candidates_command(output_format: str, debug: bool) -> None:
    """List the candidate Java paths for this platform."""
    config = DiscoveryConfig(debug_sink=debug_to_stderr if debug else None)
    rows = asyncio.run(_collect(JavaDiscovery(config)))

    if output_format == "json":
        click.echo(json.dumps(
            [{"path": path, "executable": ok} for path, ok in rows], indent=2
        ))
    else:
        print_candidates(rows)
