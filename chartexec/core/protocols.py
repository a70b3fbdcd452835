"""Protocol definitions for the helm executor boundary.

The orchestration layer talks to the helm binary only through
HelmExecutorPort. Implementations include the process-backed executor
and FakeHelm in chartexec.fakes, which records calls instead of running them.

Design principles:
- Protocols use structural typing (typing.Protocol) for flexibility
- Failures are raised as exceptions; a method returning normally succeeded
- Flags are passed variadically, in the order they appear on the command line
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from chartexec.core.models import ChartMetadata, HelmContext, ToolVersion


@runtime_checkable
class MutexGuard(Protocol):
    """Mutual-exclusion guard usable in a ``with`` statement.

    threading.Lock and threading.RLock both satisfy this protocol.
    """

    def __enter__(self) -> object: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None: ...


@runtime_checkable
class HelmExecutorPort(Protocol):
    """Capability set the orchestrator needs from the helm binary."""

    # Chart dependencies

    def update_deps(self, chart: str) -> None:
        """Run ``helm dependency update`` for a chart."""
        ...

    def build_deps(self, name: str, chart: str, *flags: str) -> None:
        """Run ``helm dependency build`` for a release's chart."""
        ...

    # Binary configuration

    def set_extra_args(self, *args: str) -> None:
        """Set arguments appended to every helm invocation."""
        ...

    def set_helm_binary(self, binary: str) -> None:
        """Set the helm executable to run."""
        ...

    def set_enable_live_output(self, enable_live_output: bool) -> None:
        """Stream helm output while commands run."""
        ...

    def set_disable_force_update(self, disable_force_update: bool) -> None:
        """Suppress ``--force-update`` on repo add."""
        ...

    # Repositories

    def add_repo(
        self,
        name: str,
        repository: str,
        cafile: str,
        certfile: str,
        keyfile: str,
        username: str,
        password: str,
        managed: str,
        pass_credentials: bool,
        skip_tls_verify: bool,
    ) -> None:
        """Register a chart repository."""
        ...

    def update_repo(self) -> None:
        """Refresh all registered chart repositories."""
        ...

    def registry_login(
        self,
        name: str,
        username: str,
        password: str,
        cafile: str,
        certfile: str,
        keyfile: str,
        skip_tls_verify: bool,
    ) -> None:
        """Log in to an OCI registry."""
        ...

    # Releases

    def sync_release(
        self, context: HelmContext, name: str, chart: str, *flags: str
    ) -> None:
        """Install or upgrade a release."""
        ...

    def diff_release(
        self,
        context: HelmContext,
        name: str,
        chart: str,
        suppress_diff: bool,
        *flags: str,
    ) -> None:
        """Diff a release against its desired state.

        Raises when there are differences or the diff itself failed.
        """
        ...

    def release_status(self, context: HelmContext, name: str, *flags: str) -> None:
        """Query the status of a release."""
        ...

    def delete_release(self, context: HelmContext, name: str, *flags: str) -> None:
        """Uninstall a release."""
        ...

    def list(self, context: HelmContext, filter: str, *flags: str) -> str:
        """List releases matching a filter and return the raw output."""
        ...

    def decrypt_secret(self, context: HelmContext, name: str, *flags: str) -> str:
        """Decrypt a secrets file and return the decrypted path."""
        ...

    def test_release(self, context: HelmContext, name: str, *flags: str) -> None:
        """Run a release's test hooks."""
        ...

    # Charts

    def fetch(self, chart: str, *flags: str) -> None:
        """Download a chart."""
        ...

    def lint(self, name: str, chart: str, *flags: str) -> None:
        """Lint a release's chart."""
        ...

    def template_release(self, name: str, chart: str, *flags: str) -> None:
        """Render a release's templates locally."""
        ...

    def chart_pull(self, chart: str, path: str, *flags: str) -> None:
        """Pull an OCI chart into the local cache."""
        ...

    def chart_export(self, chart: str, path: str) -> None:
        """Export a cached OCI chart to a directory."""
        ...

    def show_chart(self, chart_path: str) -> ChartMetadata:
        """Return the metadata a chart declares."""
        ...

    # Version

    def is_helm3(self) -> bool:
        """Whether the binary is helm 3."""
        ...

    def get_version(self) -> ToolVersion:
        """Return the binary's version."""
        ...

    def is_version_at_least(self, version: str) -> bool:
        """Whether the binary's version is at least ``version``."""
        ...
