"""Startup-time choice of the candidate enumerator for a platform tag."""

from __future__ import annotations

from javaprobe.discovery.base import CandidateEnumerator, FallbackEnumerator
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.linux import LinuxEnumerator
from javaprobe.discovery.macos import MacOSEnumerator
from javaprobe.discovery.windows import WindowsEnumerator

ENUMERATORS: dict[str, type[CandidateEnumerator]] = {
    "win32": WindowsEnumerator,
    "darwin": MacOSEnumerator,
    "linux": LinuxEnumerator,
}


def select_enumerator(config: DiscoveryConfig) -> CandidateEnumerator:
    """Instantiate the enumerator for ``config.platform``.

    Unknown platforms get ``FallbackEnumerator``, which proposes only
    ``java`` on PATH.
    """
    enumerator_cls = ENUMERATORS.get(config.platform, FallbackEnumerator)
    return enumerator_cls(config)
