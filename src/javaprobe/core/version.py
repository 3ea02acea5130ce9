"""Java version values as printed by the helper jar.

The helper prints ``System.getProperty("java.version")``, which for the
runtimes this package targets looks like ``1.8.0_151`` (legacy scheme with
an update number) or ``9.0.1`` (no update number).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from javaprobe.exceptions import VersionParseError

_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:_(\d+))?")


@dataclass(frozen=True, order=True)
class JavaVersion:
    """A parsed Java runtime version.

    Ordering compares (major, minor, patch, update) lexicographically.

    Attributes:
        major: Major component (``1`` for ``1.8.0_151``).
        minor: Minor component.
        patch: Patch component.
        update: Update number after the underscore, 0 when absent.
    """

    major: int
    minor: int
    patch: int
    update: int = 0

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        return f"{base}_{self.update}" if self.update else base


def parse_version(text: str) -> JavaVersion:
    """Parse the first ``N.N.N[_N]`` occurrence in ``text``.

    Args:
        text: Version line, e.g. ``"1.8.0_151"``.

    Returns:
        The parsed ``JavaVersion``.

    Raises:
        VersionParseError: If no ``major.minor.patch`` group is present.
    """
    m = _VERSION_RE.search(text)
    if not m:
        raise VersionParseError(f"Invalid Java version: {text!r}")
    major, minor, patch, update = m.groups()
    return JavaVersion(int(major), int(minor), int(patch), int(update or 0))
