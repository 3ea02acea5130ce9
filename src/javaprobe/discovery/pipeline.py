"""Java runtime discovery pipeline.

Discovery Algorithm:
    1. Enumerate: the platform enumerator proposes candidate paths.
    2. Filter: keep candidates the current user can execute.
    3. Deduplicate by path, keeping the first occurrence.
    4. Probe every survivor concurrently with the helper jar.
    5. Drop candidates whose probe failed.

A failing candidate never aborts the run. The order of the returned list
is not meaningful.

``get_javas`` wraps the pipeline in a process-wide ``SingleFlight`` so the
expensive probe runs at most once per process::

    installs = await get_javas()
"""

from __future__ import annotations

import asyncio
import logging

from javaprobe.core.install import JavaInstall
from javaprobe.core.single_flight import SingleFlight
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.discovery.platforms import select_enumerator
from javaprobe.exceptions import HelperJarMissingError

logger = logging.getLogger(__name__)


def dedupe(installs: list[JavaInstall]) -> list[JavaInstall]:
    """Drop repeated paths, keeping the first occurrence of each."""
    return list(dict.fromkeys(installs))


class JavaDiscovery:
    """Finds and probes the Java runtimes on this machine."""

    def __init__(self, config: DiscoveryConfig | None = None) -> None:
        self.config = config if config is not None else DiscoveryConfig()

    async def candidates(self) -> list[JavaInstall]:
        """Raw candidates from the platform enumerator, unfiltered."""
        enumerator = select_enumerator(self.config)
        candidates = await enumerator.enumerate()
        self.config.emit(
            f"{enumerator.platform_name}: {len(candidates)} candidate path(s)"
        )
        return candidates

    async def executable(self, candidates: list[JavaInstall]) -> list[JavaInstall]:
        """Keep the candidates the current user can execute."""
        fs = self.config.filesystem
        flags = await asyncio.gather(*(fs.can_execute(c.path) for c in candidates))
        return [c for c, ok in zip(candidates, flags) if ok]

    async def discover(self) -> list[JavaInstall]:
        """Run the full pipeline and return the resolved installs.

        A candidate whose helper run fails is dropped without affecting the
        others. Helper output without a version is different: the helper
        is trusted to print one, so a single such candidate fails the whole
        run and the results of the other candidates are discarded. Under
        ``SingleFlight`` the failed run is not cached.

        Returns:
            Installs whose probe succeeded. Empty when no Java was found.

        Raises:
            HelperJarMissingError: If the helper jar does not exist. Checked
                before any candidate is enumerated or probed.
            VersionParseError: If a helper run exited cleanly but printed
                no ``major.minor.patch`` version.
        """
        helper_jar = self.config.resolve_helper_jar()
        if not helper_jar.is_file():
            raise HelperJarMissingError(helper_jar)

        candidates = await self.candidates()
        survivors = dedupe(await self.executable(candidates))
        self.config.emit(f"{len(survivors)} executable candidate(s) to probe")

        await asyncio.gather(
            *(install.ensure_info(helper_jar) for install in survivors)
        )

        valid: list[JavaInstall] = []
        for install in survivors:
            if install.invalid:
                self.config.emit(f"Rejected {install.path}: {install.state.reason}")
            else:
                valid.append(install)
        logger.debug("Discovered %d Java runtime(s)", len(valid))
        return valid


def cached_discovery(config: DiscoveryConfig | None = None) -> SingleFlight[list[JavaInstall]]:
    """Build a single-flight discovery for ``config``.

    The returned object is awaited with no arguments; the pipeline runs
    once successfully and its result is reused afterwards.
    """
    return SingleFlight(JavaDiscovery(config).discover)


_default_discovery = cached_discovery()


async def get_javas() -> list[JavaInstall]:
    """All usable Java runtimes on this machine, probed once per process."""
    return await _default_discovery()
