"""Shared value types for chartexec.

This module provides the immutable records and lookup keys that executor
implementations and their tests exchange.

Types:
- HelmContext: Opaque per-call execution context passed through by callers
- ReleaseRecord: One observed call targeting a named release
- Affected: Buckets of releases touched by an orchestration run
- ListKey: Lookup key for a "list releases" invocation shape
- DiffKey: Lookup key for a "diff release" invocation shape
- ToolVersion: Structured major.minor.patch version of the helm binary
- ChartMetadata: Subset of a chart's declared metadata
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def join_flags(flags: Iterable[str]) -> str:
    """Concatenate flags into a single key component.

    Plain concatenation with no delimiter, so ``["--a", "b"]`` and
    ``["--ab"]`` produce the same key. Order is significant.
    """
    return "".join(flags)


@dataclass(frozen=True)
class HelmContext:
    """Execution context handed to release operations.

    Attributes:
        history_max: Maximum number of revisions kept per release.
        worker_index: Index of the worker dispatching the call.
    """

    history_max: int = 0
    worker_index: int = 0


@dataclass(frozen=True)
class ReleaseRecord:
    """A single recorded call against a named release."""

    name: str
    flags: tuple[str, ...] = ()


@dataclass
class Affected:
    """Releases touched by a run, grouped by outcome.

    Orchestration tests build the expected Affected from FakeHelm.releases and
    FakeHelm.deleted and compare it with what the run reports.
    """

    upgraded: list[ReleaseRecord] = field(default_factory=list)
    deleted: list[ReleaseRecord] = field(default_factory=list)
    failed: list[ReleaseRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ListKey:
    """Key identifying a distinct list invocation (filter plus joined flags)."""

    filter: str
    flags: str

    def __str__(self) -> str:
        return f"listkey(filter={self.filter},flags={self.flags})"


@dataclass(frozen=True)
class DiffKey:
    """Key identifying a distinct diff invocation."""

    name: str
    chart: str
    flags: str

    def __str__(self) -> str:
        return f"diffkey(name={self.name},chart={self.chart},flags={self.flags})"


@dataclass(frozen=True)
class ToolVersion:
    """Structured version of the helm binary."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class ChartMetadata:
    """Declared chart metadata, as reported by ``helm show chart``.

    Attributes:
        name: Chart name.
        version: Chart version (SemVer).
        app_version: Version of the packaged application.
        description: One-line chart description.
    """

    name: str = ""
    version: str = ""
    app_version: str = ""
    description: str = ""
