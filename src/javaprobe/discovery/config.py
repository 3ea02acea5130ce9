"""Discovery configuration.

``DiscoveryConfig`` bundles everything a discovery run depends on: the
helper jar, the platform tag used to choose an enumerator, the filesystem
and registry capabilities, and an optional debug sink. Passing it
explicitly keeps separate discovery runs independent of each other.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from javaprobe.core import process
from javaprobe.core.process import DEFAULT_HELPER_JAR, PROBE_TIMEOUT_SECONDS
from javaprobe.discovery.filesystem import FileSystem

if TYPE_CHECKING:
    from javaprobe.discovery.windows_registry import RegistryReader

logger = logging.getLogger(__name__)

DebugSink = Callable[[str], None]

__all__ = [
    "DEFAULT_HELPER_JAR",
    "DebugSink",
    "DiscoveryConfig",
    "PROBE_TIMEOUT_SECONDS",
]


@dataclass(frozen=True)
class DiscoveryConfig:
    """Inputs for one discovery pipeline.

    Attributes:
        helper_jar: Jar that prints ``java.version`` and the bit-width.
            ``None`` means ``DEFAULT_HELPER_JAR``.
        platform: ``sys.platform``-style tag selecting the enumerator.
        filesystem: Directory listing, stat and executability checks.
        registry: Windows registry reader. ``None`` means the real
            registry on Windows, and no registry elsewhere.
        debug_sink: Receives free-text diagnostic lines, if set.
    """

    helper_jar: Path | None = None
    platform: str = field(default_factory=lambda: sys.platform)
    filesystem: FileSystem = field(default_factory=FileSystem)
    registry: RegistryReader | None = None
    debug_sink: DebugSink | None = None

    def resolve_helper_jar(self) -> Path:
        """The helper jar this run will use."""
        if self.helper_jar is not None:
            return self.helper_jar
        return process.DEFAULT_HELPER_JAR

    def emit(self, message: str) -> None:
        """Log a diagnostic line and forward it to the debug sink."""
        logger.debug(message)
        if self.debug_sink is not None:
            self.debug_sink(message)
