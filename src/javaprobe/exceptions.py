"""javaprobe exception hierarchy.

All public exceptions inherit from JavaProbeError, giving callers a single
base class to catch when they want to handle any javaprobe-specific failure
without swallowing unrelated errors.
"""


class JavaProbeError(Exception):
    """Base exception for all javaprobe errors."""


class VersionParseError(JavaProbeError, ValueError):
    """Raised when a version string lacks the ``major.minor.patch`` groups.

    The helper jar is trusted to print a conforming version line, so this
    error is not recovered per candidate. It surfaces as a failure of the
    whole discovery run.
    """


class ProbeError(JavaProbeError):
    """Raised when invoking a candidate with the helper jar fails.

    Covers spawn errors, non-zero exit codes and timeouts. Caught by
    ``JavaInstall.ensure_info`` and recorded as a permanent invalid state.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class EnumerationError(JavaProbeError):
    """Raised when a candidate source (directory or registry key) is unreadable.

    Enumerators catch this and treat the source as contributing zero
    candidates.
    """


class HelperJarMissingError(JavaProbeError):
    """Raised when the version-printing helper jar does not exist.

    Every probe would fail without it, so the discovery run fails instead
    of reporting that no Java runtime was found.
    """

    def __init__(self, path: object) -> None:
        super().__init__(f"helper jar not found: {path}")
        self.path = path
