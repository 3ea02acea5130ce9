"""A single Java candidate and its lazily computed probe result.

A ``JavaInstall`` is created for every path an enumerator proposes, whether
or not anything exists there. Its probe state moves exactly once, from
``Unprobed`` to either ``Resolved`` or ``Invalid``, and never back::

    Unprobed --ensure_info()--> Resolved(architecture, version)
             \\-----------------> Invalid(reason)

Concurrent ``ensure_info`` calls on the same install share one helper run.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from javaprobe.core.process import DEFAULT_HELPER_JAR, run_helper
from javaprobe.core.version import JavaVersion, parse_version
from javaprobe.exceptions import ProbeError

logger = logging.getLogger(__name__)


class Architecture(str, Enum):
    """Bit-width of a runtime's data model, as reported by the helper jar."""

    X86 = "x86"
    X64 = "x64"
    UNKNOWN = "unknown"

    @classmethod
    def from_bitness(cls, marker: str) -> Architecture:
        """Map the helper's ``32``/``64`` marker; anything else is unknown."""
        return _BITNESS.get(marker.strip(), cls.UNKNOWN)


_BITNESS: dict[str, Architecture] = {
    "32": Architecture.X86,
    "64": Architecture.X64,
}


# ---------------------------------------------------------------------------
# Probe states
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Unprobed:
    """The helper has not completed for this candidate yet."""


@dataclass(frozen=True)
class Resolved:
    """The helper ran successfully."""

    architecture: Architecture
    version: JavaVersion


@dataclass(frozen=True)
class Invalid:
    """The helper could not be run; permanent for the process lifetime."""

    reason: str


ProbeState = Union[Unprobed, Resolved, Invalid]

_UNPROBED = Unprobed()


def parse_helper_output(stdout: str) -> Resolved:
    """Build a ``Resolved`` state from the helper's two output lines.

    Raises:
        VersionParseError: If the first line carries no version.
    """
    lines = stdout.strip().splitlines()
    version = parse_version(lines[0] if lines else "")
    arch = Architecture.from_bitness(lines[1]) if len(lines) > 1 else Architecture.UNKNOWN
    return Resolved(architecture=arch, version=version)


class JavaInstall:
    """One candidate Java executable, identified by its path.

    Two installs are equal when their paths are equal. ``architecture`` and
    ``version`` stay ``None`` until a successful ``ensure_info``.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._state: ProbeState = _UNPROBED
        self._inflight: asyncio.Future[ProbeState] | None = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def state(self) -> ProbeState:
        return self._state

    @property
    def architecture(self) -> Architecture | None:
        return self._state.architecture if isinstance(self._state, Resolved) else None

    @property
    def version(self) -> JavaVersion | None:
        return self._state.version if isinstance(self._state, Resolved) else None

    @property
    def resolved(self) -> bool:
        return isinstance(self._state, Resolved)

    @property
    def invalid(self) -> bool:
        return isinstance(self._state, Invalid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavaInstall):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"JavaInstall({self._path!r}, state={self._state!r})"

    async def ensure_info(self, helper_jar: Path | None = None) -> ProbeState:
        """Probe this candidate once and return its final state.

        Returns immediately when the state is already ``Resolved`` or
        ``Invalid``. Callers arriving while a probe is running await that
        same probe.

        Args:
            helper_jar: Helper jar to run; defaults to ``DEFAULT_HELPER_JAR``.

        Returns:
            The ``Resolved`` or ``Invalid`` state.

        Raises:
            VersionParseError: If the helper succeeded but printed no version.
        """
        if not isinstance(self._state, Unprobed):
            return self._state
        if self._inflight is None:
            self._inflight = asyncio.ensure_future(
                self._probe(helper_jar or DEFAULT_HELPER_JAR)
            )
        return await asyncio.shield(self._inflight)

    async def _probe(self, helper_jar: Path) -> ProbeState:
        try:
            try:
                stdout = await run_helper(self._path, helper_jar)
            except ProbeError as exc:
                logger.debug("Candidate %s is invalid: %s", self._path, exc.reason)
                self._state = Invalid(exc.reason)
                return self._state
            self._state = parse_helper_output(stdout)
            logger.debug("Candidate %s resolved: %s", self._path, self._state)
            return self._state
        finally:
            self._inflight = None
