"""Windows registry capability.

``RegistryReader`` is the narrow interface the Windows enumerator needs:
open a key in a given registry view and list its subkeys, then read named
values from each subkey. ``WinRegReader`` implements it over the standard
``winreg`` module; tests substitute an in-memory reader.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum

from javaprobe.exceptions import EnumerationError

if sys.platform == "win32":
    import winreg
else:
    winreg = None


class RegistryView(str, Enum):
    """Registry redirection view (WOW64)."""

    X64 = "x64"
    X86 = "x86"


class RegistryKey(ABC):
    """An opened registry subkey."""

    @abstractmethod
    def get_value(self, name: str) -> str | None:
        """Return the named value as text, or ``None`` when absent."""


class RegistryReader(ABC):
    """Read access to one registry hive."""

    @abstractmethod
    def subkeys(self, key_path: str, view: RegistryView) -> list[RegistryKey]:
        """List the immediate subkeys of ``key_path``.

        Raises:
            OSError: If the key does not exist or cannot be read.
        """


class _WinRegKey(RegistryKey):
    def __init__(self, hive: int, path: str, access: int) -> None:
        self._hive = hive
        self._path = path
        self._access = access

    def get_value(self, name: str) -> str | None:
        try:
            with winreg.OpenKey(self._hive, self._path, 0, self._access) as key:
                value, _kind = winreg.QueryValueEx(key, name)
        except FileNotFoundError:
            return None
        return str(value)


class WinRegReader(RegistryReader):
    """``RegistryReader`` backed by ``winreg``, ``HKEY_LOCAL_MACHINE`` by default."""

    def __init__(self, hive: int | None = None) -> None:
        if winreg is None:
            raise EnumerationError("the Windows registry is not available on this platform")
        self._hive = winreg.HKEY_LOCAL_MACHINE if hive is None else hive

    def subkeys(self, key_path: str, view: RegistryView) -> list[RegistryKey]:
        flag = winreg.KEY_WOW64_64KEY if view is RegistryView.X64 else winreg.KEY_WOW64_32KEY
        access = winreg.KEY_READ | flag
        with winreg.OpenKey(self._hive, key_path, 0, access) as key:
            count = winreg.QueryInfoKey(key)[0]
            names = [winreg.EnumKey(key, i) for i in range(count)]
        return [_WinRegKey(self._hive, f"{key_path}\\{name}", access) for name in names]
