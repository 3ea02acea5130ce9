"""Helper-jar invocation for a single Java candidate.

Runs ``<java> -jar <helper>`` as an asyncio subprocess with a hard
wall-clock timeout. The helper prints two lines: the runtime's
``java.version`` and its data model bit-width (``32`` or ``64``).

Raises ``ProbeError`` on any failure so that callers can record the
candidate as permanently invalid.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
import sys
from pathlib import Path

from javaprobe.exceptions import ProbeError

logger = logging.getLogger(__name__)

# Wall-clock bound for one helper run (seconds). Fixed, not configurable.
PROBE_TIMEOUT_SECONDS: float = 1.0

# The helper jar is an external collaborator shipped next to the package.
DEFAULT_HELPER_JAR: Path = Path(__file__).resolve().parent.parent / "java" / "PrintJavaVersion.jar"

_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0) if sys.platform == "win32" else 0


async def run_helper(
    java_path: str,
    helper_jar: Path,
    *,
    timeout: float = PROBE_TIMEOUT_SECONDS,
) -> str:
    """Run the helper jar with ``java_path`` and return its stdout.

    Args:
        java_path: Candidate executable (absolute path or bare command).
        helper_jar: Path to the version-printing helper jar.
        timeout: Seconds before the child is killed.

    Returns:
        Decoded standard output.

    Raises:
        ProbeError: On spawn failure, timeout, or non-zero exit.
    """
    argv = [java_path, "-jar", str(helper_jar)]
    logger.debug("Running %s", " ".join(argv))
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            creationflags=_CREATION_FLAGS,
        )
    except OSError as exc:
        raise ProbeError(java_path, f"spawn failed: {exc}") from exc

    try:
        stdout, _stderr = await asyncio.wait_for(proc.communicate(), timeout)
    except asyncio.TimeoutError:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
        await proc.wait()
        raise ProbeError(java_path, f"timed out after {timeout:g}s") from None

    if proc.returncode != 0:
        raise ProbeError(java_path, f"exited with code {proc.returncode}")
    return stdout.decode("utf-8", errors="replace")
