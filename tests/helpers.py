"""In-memory stand-ins for the filesystem and registry capabilities.

Used by the discovery and pipeline tests to simulate each platform
without touching the real machine.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from javaprobe.core.install import JavaInstall, ProbeState
from javaprobe.core.process import DEFAULT_HELPER_JAR
from javaprobe.discovery.base import CandidateEnumerator
from javaprobe.discovery.filesystem import FileSystem
from javaprobe.discovery.windows_registry import RegistryKey, RegistryReader, RegistryView
from javaprobe.exceptions import ProbeError


def _norm(path: str) -> str:
    return path.replace("\\", "/").rstrip("/")


class FakeFileSystem(FileSystem):
    """Directory tree held in a dict of ``dir -> entry names``.

    Entries listed under a directory that are not themselves keys of
    ``dirs`` are plain files. Paths in ``unreadable`` raise
    ``PermissionError`` when listed or stat'ed.
    """

    def __init__(
        self,
        dirs: dict[str, list[str]] | None = None,
        executables: Iterable[str] = (),
        unreadable: Iterable[str] = (),
    ) -> None:
        self.dirs = {_norm(k): list(v) for k, v in (dirs or {}).items()}
        self.executables = set(executables)
        self.unreadable = {_norm(p) for p in unreadable}
        self.checked: list[str] = []

    def _exists(self, path: str) -> bool:
        if path in self.dirs:
            return True
        parent, _, name = path.rpartition("/")
        return name in self.dirs.get(parent, [])

    async def list_dir(self, path: str) -> list[str]:
        key = _norm(path)
        if key in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        if key not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", path)
        return list(self.dirs[key])

    async def is_dir(self, path: str) -> bool:
        key = _norm(path)
        if key in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        if not self._exists(key):
            raise FileNotFoundError(2, "No such file or directory", path)
        return key in self.dirs

    async def can_execute(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.executables


class FakeRegistryKey(RegistryKey):
    def __init__(self, values: dict[str, str], denied: bool = False) -> None:
        self.values = values
        self.denied = denied

    def get_value(self, name: str) -> str | None:
        if self.denied:
            raise PermissionError(5, "Access is denied")
        return self.values.get(name)


class FakeRegistry(RegistryReader):
    """Registry keyed by ``(key_path, view)``.

    Each entry maps subkey names to their values. Missing pairs raise
    ``FileNotFoundError``; pairs in ``denied`` raise ``PermissionError``.
    """

    def __init__(
        self,
        keys: dict[tuple[str, RegistryView], dict[str, dict[str, str]]] | None = None,
        denied: Iterable[tuple[str, RegistryView]] = (),
        denied_subkeys: Iterable[str] = (),
    ) -> None:
        self.keys = keys or {}
        self.denied = set(denied)
        self.denied_subkeys = set(denied_subkeys)
        self.queried: list[tuple[str, RegistryView]] = []

    def subkeys(self, key_path: str, view: RegistryView) -> list[RegistryKey]:
        self.queried.append((key_path, view))
        if (key_path, view) in self.denied:
            raise PermissionError(5, "Access is denied")
        if (key_path, view) not in self.keys:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        return [
            FakeRegistryKey(values, denied=name in self.denied_subkeys)
            for name, values in self.keys[(key_path, view)].items()
        ]


class ListEnumerator(CandidateEnumerator):
    """Enumerator returning a fixed list of paths, duplicates included."""

    def __init__(self, config, paths: list[str]) -> None:
        super().__init__(config)
        self.paths = paths

    @property
    def platform_name(self) -> str:
        return "test"

    async def enumerate(self) -> list[JavaInstall]:
        return [JavaInstall(p) for p in self.paths]


class FakeHelper:
    """Replacement for ``run_helper`` driven by a ``path -> outcome`` table.

    An outcome is either the stdout text to return or an exception
    instance to raise. Unknown paths fail with ``ProbeError``.
    """

    def __init__(
        self,
        outcomes: dict[str, str | BaseException] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.outcomes = outcomes or {}
        self.delay = delay
        self.calls: list[str] = []

    async def __call__(self, java_path, helper_jar=DEFAULT_HELPER_JAR, *, timeout=1.0) -> str:
        self.calls.append(java_path)
        await asyncio.sleep(self.delay)
        outcome = self.outcomes.get(java_path, ProbeError(java_path, "no such file"))
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def states(installs: list[JavaInstall]) -> dict[str, ProbeState]:
    """Map each install's path to its probe state."""
    return {i.path: i.state for i in installs}
