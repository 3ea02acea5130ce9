"""javaprobe: Discover and identify Java runtime installations.

Public API::

    import asyncio
    from javaprobe import get_javas

    for install in asyncio.run(get_javas()):
        print(install.path, install.architecture, install.version)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from javaprobe.core.install import Architecture, JavaInstall
from javaprobe.core.version import JavaVersion, parse_version
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.pipeline import JavaDiscovery, cached_discovery, get_javas

__all__ = [
    "Architecture",
    "DiscoveryConfig",
    "JavaDiscovery",
    "JavaInstall",
    "JavaVersion",
    "cached_discovery",
    "get_javas",
    "parse_version",
]
