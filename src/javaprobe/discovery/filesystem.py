"""Filesystem capability used by the enumerators and the pipeline.

Every primitive runs in a worker thread so the event loop keeps serving
other probes while the OS call blocks.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import stat

from javaprobe.exceptions import EnumerationError


def _can_execute(path: str) -> bool:
    # A bare command name ("java") is looked up on PATH like the shell would.
    if os.path.basename(path) == path:
        return shutil.which(path) is not None
    return os.path.isfile(path) and os.access(path, os.X_OK)


class FileSystem:
    """Async wrappers over the OS calls discovery needs."""

    async def list_dir(self, path: str) -> list[str]:
        """Return entry names in ``path``. Raises ``OSError``."""
        return await asyncio.to_thread(os.listdir, path)

    async def is_dir(self, path: str) -> bool:
        """Whether ``path`` is a directory. Raises ``OSError``."""
        st = await asyncio.to_thread(os.stat, path)
        return stat.S_ISDIR(st.st_mode)

    async def can_execute(self, path: str) -> bool:
        """Whether the current user may execute ``path``. Never raises."""
        try:
            return await asyncio.to_thread(_can_execute, path)
        except OSError:
            return False


async def list_subdirectories(fs: FileSystem, root: str) -> list[str]:
    """Names of the immediate subdirectories of ``root``.

    Entries that cannot be stat'ed are skipped.

    Raises:
        EnumerationError: If ``root`` itself cannot be listed.
    """
    try:
        names = await fs.list_dir(root)
    except OSError as exc:
        raise EnumerationError(f"cannot list {root}: {exc}") from exc

    async def _check(name: str) -> bool:
        try:
            return await fs.is_dir(os.path.join(root, name))
        except OSError:
            return False

    flags = await asyncio.gather(*(_check(name) for name in names))
    return [name for name, is_dir in zip(names, flags) if is_dir]
