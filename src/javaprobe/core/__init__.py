"""Core value types and coordination primitives.

Submodules
----------
- ``version``: ``JavaVersion`` and the version-string parser.
- ``install``: ``JavaInstall``, one candidate path and its probe state.
- ``process``: Runs the helper jar against a candidate.
- ``single_flight``: ``SingleFlight``, the process-lifetime result cache.
"""

from javaprobe.core.install import (
    Architecture,
    Invalid,
    JavaInstall,
    ProbeState,
    Resolved,
    Unprobed,
)
from javaprobe.core.single_flight import CacheState, SingleFlight
from javaprobe.core.version import JavaVersion, parse_version

__all__ = [
    "Architecture",
    "CacheState",
    "Invalid",
    "JavaInstall",
    "JavaVersion",
    "ProbeState",
    "Resolved",
    "SingleFlight",
    "Unprobed",
    "parse_version",
]
