"""Linux candidate enumerator.

Linux only checks a short static list. It does not scan install roots
such as ``/usr/lib/jvm``.
"""

from __future__ import annotations

from javaprobe.core.install import JavaInstall
from javaprobe.discovery.base import BARE_JAVA, CandidateEnumerator, static_candidates

LINUX_STATIC_PATHS: tuple[str, ...] = (
    BARE_JAVA,
    "/opt/java/bin/java",
    "/usr/bin/java",
)


class LinuxEnumerator(CandidateEnumerator):
    """Static-list enumerator for Linux."""

    @property
    def platform_name(self) -> str:
        return "Linux"

    async def enumerate(self) -> list[JavaInstall]:
        return static_candidates(LINUX_STATIC_PATHS)
