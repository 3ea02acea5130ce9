"""macOS candidate enumerator.

Combines a static list of well-known locations with the bundles found in
the two ``JavaVirtualMachines`` roots. Each root is scanned concurrently;
a root that cannot be listed contributes nothing.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath

from javaprobe.core.install import JavaInstall
from javaprobe.discovery.base import BARE_JAVA, CandidateEnumerator, static_candidates
from javaprobe.discovery.filesystem import list_subdirectories
from javaprobe.exceptions import EnumerationError

logger = logging.getLogger(__name__)

MACOS_STATIC_PATHS: tuple[str, ...] = (
    BARE_JAVA,
    "/Applications/Xcode.app/Contents/Applications/Application Loader.app"
    "/Contents/MacOS/itms/java/bin/java",
    "/Library/Internet Plug-Ins/JavaAppletPlugin.plugin/Contents/Home/bin/java",
    "/System/Library/Frameworks/JavaVM.framework/Versions/Current/Commands/java",
)

# (root, executables relative to each bundle under root)
MACOS_VM_ROOTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "/Library/Java/JavaVirtualMachines/",
        ("Contents/Home/bin/java", "Contents/Home/jre/bin/java"),
    ),
    (
        "/System/Library/Java/JavaVirtualMachines/",
        ("Contents/Home/bin/java", "Contents/Commands/java"),
    ),
)


class MacOSEnumerator(CandidateEnumerator):
    """Static list plus ``JavaVirtualMachines`` bundle scan."""

    @property
    def platform_name(self) -> str:
        return "macOS"

    async def enumerate(self) -> list[JavaInstall]:
        scans = await asyncio.gather(
            *(self._scan_root(root, rel) for root, rel in MACOS_VM_ROOTS)
        )
        candidates = static_candidates(MACOS_STATIC_PATHS)
        for found in scans:
            candidates.extend(found)
        return candidates

    async def _scan_root(self, root: str, executables: tuple[str, ...]) -> list[JavaInstall]:
        try:
            bundles = await list_subdirectories(self.config.filesystem, root)
        except EnumerationError as exc:
            logger.info("Skipping VM root: %s", exc)
            self.config.emit(f"Skipping VM root: {exc}")
            return []
        return [
            JavaInstall(posixpath.join(root, bundle, rel))
            for bundle in bundles
            for rel in executables
        ]
