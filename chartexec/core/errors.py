"""Exceptions raised by helm executor implementations."""

from __future__ import annotations

from collections.abc import Sequence


class HelmExecError(Exception):
    """Base exception for executor failures."""

    pass


class SimulatedFailureError(HelmExecError):
    """Raised when a release name or chart reference carries the failure sentinel.

    Example:
        >>> raise SimulatedFailureError("sync_release", "my-error-release")
        SimulatedFailureError: simulated sync_release failure for: my-error-release
    """

    def __init__(self, operation: str, target: str) -> None:
        self.operation = operation
        self.target = target
        super().__init__(f"simulated {operation} failure for: {target}")


class UnexpectedCallError(HelmExecError):
    """Raised in strict mode when no expectation matches a call's key."""

    def __init__(
        self, kind: str, key: object, known_keys: Sequence[object] | None = None
    ) -> None:
        self.kind = kind
        self.key = key
        self.known_keys = list(known_keys) if known_keys is not None else None
        if self.known_keys is not None:
            known = ", ".join(str(k) for k in self.known_keys)
            message = f"unexpected {kind} key: {key} not found in {known}"
        else:
            message = f"unexpected {kind} with key: {key}"
        super().__init__(message)


class ChartNotFoundError(HelmExecError):
    """Raised when chart metadata is requested for an unknown chart path."""

    def __init__(self, chart_path: str) -> None:
        self.chart_path = chart_path
        super().__init__(f"chart metadata not found: {chart_path}")


class MalformedVersionError(HelmExecError, ValueError):
    """Raised when a version string passed by test setup cannot be parsed."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"malformed version string: {version!r}")
