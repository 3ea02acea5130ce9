"""Windows candidate enumerator.

Sources, queried concurrently:

1. Default JRE 6/7/8 locations under both ``Program Files`` roots, plus
   ``java`` on PATH.
2. ``JavaHome`` values under the JavaSoft JRE and JDK registry keys, read
   in both the 64-bit and 32-bit registry views.

A registry key that cannot be opened contributes nothing for that
(key, view) pair. Subkeys without ``JavaHome`` are skipped.
"""

from __future__ import annotations

import asyncio
import logging
import ntpath

from javaprobe.core.install import JavaInstall
from javaprobe.discovery.base import BARE_JAVA, CandidateEnumerator, static_candidates
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.windows_registry import (
    RegistryKey,
    RegistryReader,
    RegistryView,
    WinRegReader,
)
from javaprobe.exceptions import EnumerationError

logger = logging.getLogger(__name__)

WINDOWS_STATIC_PATHS: tuple[str, ...] = (
    "C:/Program Files/Java/jre8/bin/javaw.exe",
    "C:/Program Files/Java/jre7/bin/javaw.exe",
    "C:/Program Files/Java/jre6/bin/javaw.exe",
    "C:/Program Files (x86)/Java/jre8/bin/javaw.exe",
    "C:/Program Files (x86)/Java/jre7/bin/javaw.exe",
    "C:/Program Files (x86)/Java/jre6/bin/javaw.exe",
    BARE_JAVA,
)

JAVA_REGISTRY_KEYS: tuple[str, ...] = (
    "SOFTWARE\\JavaSoft\\Java Runtime Environment",
    "SOFTWARE\\JavaSoft\\Java Development Kit",
)

JAVA_HOME_VALUE: str = "JavaHome"


class WindowsEnumerator(CandidateEnumerator):
    """Static list plus JavaSoft registry lookups."""

    def __init__(self, config: DiscoveryConfig) -> None:
        super().__init__(config)
        self._registry: RegistryReader | None = config.registry
        if self._registry is None:
            try:
                self._registry = WinRegReader()
            except EnumerationError as exc:
                config.emit(f"Registry lookups disabled: {exc}")

    @property
    def platform_name(self) -> str:
        return "Windows"

    async def enumerate(self) -> list[JavaInstall]:
        lookups = await asyncio.gather(
            *(
                self._from_registry_key(key, view)
                for key in JAVA_REGISTRY_KEYS
                for view in RegistryView
            )
        )
        candidates = static_candidates(WINDOWS_STATIC_PATHS)
        for found in lookups:
            candidates.extend(found)
        return candidates

    async def _from_registry_key(self, key_path: str, view: RegistryView) -> list[JavaInstall]:
        if self._registry is None:
            return []
        try:
            subkeys = await asyncio.to_thread(self._registry.subkeys, key_path, view)
        except OSError as exc:
            logger.info("Cannot open %s (%s view): %s", key_path, view.value, exc)
            self.config.emit(f"Cannot open {key_path} ({view.value} view): {exc}")
            return []

        homes = await asyncio.gather(*(self._java_home(sub) for sub in subkeys))
        return [
            JavaInstall(ntpath.join(home, "bin", "javaw.exe"))
            for home in homes
            if home
        ]

    async def _java_home(self, subkey: RegistryKey) -> str | None:
        try:
            return await asyncio.to_thread(subkey.get_value, JAVA_HOME_VALUE)
        except OSError as exc:
            self.config.emit(f"Cannot read {JAVA_HOME_VALUE}: {exc}")
            return None
