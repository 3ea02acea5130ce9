"""Shared fixtures for javaprobe tests."""

from __future__ import annotations

import pathlib
from typing import Callable

import pytest


@pytest.fixture
def make_java(tmp_path: pathlib.Path) -> Callable[[str, str], str]:
    """Factory for fake ``java`` executables (POSIX shell scripts).

    The script ignores its ``-jar <helper>`` arguments and runs ``body``.
    """

    def _make(name: str, body: str) -> str:
        script = tmp_path / name
        script.write_text("#!/bin/sh\n" + body)
        script.chmod(0o755)
        return str(script)

    return _make


@pytest.fixture
def helper_jar(tmp_path_factory: pytest.TempPathFactory) -> pathlib.Path:
    """Placeholder helper jar; the fake java scripts never read it.

    Kept out of ``tmp_path`` so directory listings there stay clean.
    """
    jar = tmp_path_factory.mktemp("helper") / "PrintJavaVersion.jar"
    jar.write_bytes(b"")
    return jar


@pytest.fixture(autouse=True)
def default_helper_jar(
    monkeypatch: pytest.MonkeyPatch, helper_jar: pathlib.Path
) -> pathlib.Path:
    """Point the package default at an existing placeholder jar."""
    monkeypatch.setattr("javaprobe.core.process.DEFAULT_HELPER_JAR", helper_jar)
    return helper_jar
