"""Shared fixtures for CLI tests.

``simulated_machine`` swaps the platform enumerator, the filesystem and
the helper runner so CLI commands run the real pipeline against a fixed
set of fake Java candidates.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

import pytest
from click.testing import CliRunner

from javaprobe.cli import candidates_cmd, list_cmd
from javaprobe.core import install as install_mod
from javaprobe.discovery import pipeline as pipeline_mod
from javaprobe.discovery.config import DiscoveryConfig
from javaprobe.exceptions import ProbeError

from tests.helpers import FakeFileSystem, FakeHelper, ListEnumerator


@dataclass
class SimulatedMachine:
    filesystem: FakeFileSystem
    helper: FakeHelper


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


def _install(
    monkeypatch: pytest.MonkeyPatch,
    paths: list[str],
    executables: list[str],
    outcomes: dict,
) -> SimulatedMachine:
    fs = FakeFileSystem(executables=executables)
    helper = FakeHelper(outcomes)
    monkeypatch.setattr(
        pipeline_mod, "select_enumerator", lambda config: ListEnumerator(config, paths)
    )
    monkeypatch.setattr(install_mod, "run_helper", helper)
    config_cls = functools.partial(DiscoveryConfig, filesystem=fs)
    monkeypatch.setattr(list_cmd, "DiscoveryConfig", config_cls)
    monkeypatch.setattr(candidates_cmd, "DiscoveryConfig", config_cls)
    return SimulatedMachine(filesystem=fs, helper=helper)


@pytest.fixture
def machine_with_javas(monkeypatch: pytest.MonkeyPatch) -> SimulatedMachine:
    """Two working runtimes, one broken one and one missing path."""
    return _install(
        monkeypatch,
        paths=["/usr/bin/java", "/opt/jdk8/bin/java", "/opt/broken/bin/java", "/missing/java"],
        executables=["/usr/bin/java", "/opt/jdk8/bin/java", "/opt/broken/bin/java"],
        outcomes={
            "/usr/bin/java": "11.0.2\n64\n",
            "/opt/jdk8/bin/java": "1.8.0_151\n32\n",
            "/opt/broken/bin/java": ProbeError("/opt/broken/bin/java", "exited with code 1"),
        },
    )


@pytest.fixture
def machine_without_javas(monkeypatch: pytest.MonkeyPatch) -> SimulatedMachine:
    """Only non-existent candidates."""
    return _install(
        monkeypatch,
        paths=["java", "/usr/bin/java"],
        executables=[],
        outcomes={},
    )
