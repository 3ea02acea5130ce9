"""Base class for platform candidate enumerators.

An enumerator proposes every path where a Java executable might live on
one operating system. It does not check that the paths exist; the
pipeline filters and probes afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from javaprobe.core.install import JavaInstall
from javaprobe.discovery.config import DiscoveryConfig

# Resolved through PATH at execution time.
BARE_JAVA: str = "java"


def static_candidates(paths: Iterable[str]) -> list[JavaInstall]:
    """Wrap a fixed list of paths as fresh ``JavaInstall`` candidates."""
    return [JavaInstall(path) for path in paths]


class CandidateEnumerator(ABC):
    """Produces the raw candidate list for one platform.

    Subclasses implement ``enumerate``. A failing source (an unreadable
    directory or registry key) must contribute zero candidates rather
    than fail the whole enumeration.
    """

    def __init__(self, config: DiscoveryConfig) -> None:
        self.config = config

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Human-readable platform name (e.g. 'macOS')."""

    @abstractmethod
    async def enumerate(self) -> list[JavaInstall]:
        """Return every candidate for this platform, duplicates allowed."""


class FallbackEnumerator(CandidateEnumerator):
    """Used on platforms without a dedicated enumerator: PATH lookup only."""

    @property
    def platform_name(self) -> str:
        return self.config.platform

    async def enumerate(self) -> list[JavaInstall]:
        return static_candidates([BARE_JAVA])
