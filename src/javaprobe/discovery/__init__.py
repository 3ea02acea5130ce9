"""Platform discovery of Java runtime candidates.

Public API::

    from javaprobe.discovery import DiscoveryConfig, JavaDiscovery

    discovery = JavaDiscovery(DiscoveryConfig(debug_sink=print))
    installs = asyncio.run(discovery.discover())
"""

from __future__ import annotations

from javaprobe.discovery.base import CandidateEnumerator, FallbackEnumerator
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.filesystem import FileSystem
from javaprobe.discovery.linux import LinuxEnumerator
from javaprobe.discovery.macos import MacOSEnumerator
from javaprobe.discovery.pipeline import JavaDiscovery, cached_discovery, get_javas
from javaprobe.discovery.platforms import select_enumerator
from javaprobe.discovery.windows import WindowsEnumerator

__all__ = [
    "CandidateEnumerator",
    "DiscoveryConfig",
    "FallbackEnumerator",
    "FileSystem",
    "JavaDiscovery",
    "LinuxEnumerator",
    "MacOSEnumerator",
    "WindowsEnumerator",
    "cached_discovery",
    "get_javas",
    "select_enumerator",
]
