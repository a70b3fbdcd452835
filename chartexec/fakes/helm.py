"""In-memory fake of the helm executor.

FakeHelm records every call it receives and answers from expectations the
test registers up front, so orchestration code can be exercised without a
helm binary.

Behavior summary:
- Mutating operations fail with SimulatedFailureError when the release name
  (or chart reference, for dependency operations) contains the sentinel.
- list() and diff_release() answer from the ``lists`` and ``diffs`` maps.
  When a map is None every call gets a permissive default; when it is set, a
  miss either defaults silently or raises UnexpectedCallError in strict mode.
- ``releases_lock``, ``charts_lock`` and ``diff_lock`` guard their lists when
  set. Leave them unset in single-threaded tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import semver

from chartexec.core.errors import (
    ChartNotFoundError,
    MalformedVersionError,
    SimulatedFailureError,
    UnexpectedCallError,
)
from chartexec.core.models import (
    ChartMetadata,
    DiffKey,
    ListKey,
    ReleaseRecord,
    ToolVersion,
    join_flags,
)
from chartexec.infra.io.config import FakeHelmConfig
from chartexec.infra.tools.locking import guarded

if TYPE_CHECKING:
    from chartexec.core.models import HelmContext
    from chartexec.core.protocols import MutexGuard

logger = logging.getLogger(__name__)

UpdateDepsCallback = Callable[[str], None]


def parse_version(text: str) -> semver.Version:
    """Parse a SemVer string the way helm reports versions.

    A leading ``v`` is accepted and a missing minor or patch counts as zero.

    Raises:
        MalformedVersionError: ``text`` is not a valid SemVer string.
    """
    candidate = text[1:] if text.startswith("v") else text
    try:
        return semver.Version.parse(candidate, optional_minor_and_patch=True)
    except (ValueError, TypeError) as e:
        raise MalformedVersionError(text) from e


def _default_chart_metadata() -> dict[str, ChartMetadata]:
    return {"../../foo-bar": ChartMetadata(version="3.2.0")}


class FakeHelm:
    """Recording fake implementing HelmExecutorPort.

    All state is public so tests can configure it before the run and assert
    on it afterwards.

    Example:
        from chartexec.core.models import DiffKey, HelmContext

        # Strict diff expectations
        helm = FakeHelm(
            diffs={DiffKey("app", "chart-x", "--flag"): None},
            fail_on_unexpected_diff=True,
        )
        helm.diff_release(HelmContext(), "app", "chart-x", False, "--flag")
        # raises UnexpectedCallError naming diffkey(name=other,...)
        helm.diff_release(HelmContext(), "other", "chart-x", False, "--flag")

        # Force a failure by name; raises SimulatedFailureError
        helm.sync_release(HelmContext(), "db-error", "stable/db")
    """

    def __init__(
        self,
        *,
        lists: dict[ListKey, str] | None = None,
        diffs: dict[DiffKey, BaseException | None] | None = None,
        fail_on_unexpected_diff: bool | None = None,
        fail_on_unexpected_list: bool | None = None,
        version: semver.Version | str | None = None,
        helm3: bool = False,
        update_deps_callbacks: dict[str, UpdateDepsCallback] | None = None,
        chart_metadata: dict[str, ChartMetadata] | None = None,
        releases_lock: MutexGuard | None = None,
        charts_lock: MutexGuard | None = None,
        diff_lock: MutexGuard | None = None,
        config: FakeHelmConfig | None = None,
    ) -> None:
        """Initialize the fake.

        Args:
            lists: Expected list calls mapped to their output. None disables
                lookup and every list returns the configured placeholder.
            diffs: Expected diff calls mapped to the exception to raise, or
                None for "no differences". None disables lookup.
            fail_on_unexpected_diff: Raise on unregistered diffs. Defaults to
                the config value.
            fail_on_unexpected_list: Raise on unregistered lists. Defaults to
                the config value.
            version: Helm version to report; a string is parsed as SemVer.
            helm3: Answer for is_helm3() when no version is configured.
            update_deps_callbacks: Per-chart hooks run by update_deps().
            chart_metadata: Exact chart paths answered by show_chart().
            releases_lock: Guard for ``releases``.
            charts_lock: Guard for ``charts``.
            diff_lock: Guard for ``diffed``.
            config: Sentinel, placeholder and default strictness settings.
        """
        self.config = config or FakeHelmConfig()

        # Observations
        self.charts: list[str] = []
        self.repo: list[str] = []
        self.releases: list[ReleaseRecord] = []
        self.deleted: list[ReleaseRecord] = []
        self.linted: list[ReleaseRecord] = []
        self.templated: list[ReleaseRecord] = []
        self.diffed: list[ReleaseRecord] = []

        # Expectations
        self.lists = lists
        self.diffs = diffs
        self.fail_on_unexpected_diff = (
            self.config.fail_on_unexpected_diff
            if fail_on_unexpected_diff is None
            else fail_on_unexpected_diff
        )
        self.fail_on_unexpected_list = (
            self.config.fail_on_unexpected_list
            if fail_on_unexpected_list is None
            else fail_on_unexpected_list
        )
        self.update_deps_callbacks = update_deps_callbacks
        self.chart_metadata = (
            _default_chart_metadata() if chart_metadata is None else chart_metadata
        )

        # Version
        self.version = version
        self.helm3 = helm3

        # Guards
        self.releases_lock = releases_lock
        self.charts_lock = charts_lock
        self.diff_lock = diff_lock

        # Settings captured from setters; no effect on behavior
        self.extra_args: tuple[str, ...] = ()
        self.helm_binary = ""
        self.enable_live_output = False
        self.disable_force_update = False

    @property
    def version(self) -> semver.Version | None:
        """Configured helm version, or None when unknown."""
        return self._version

    @version.setter
    def version(self, value: semver.Version | str | None) -> None:
        self._version = parse_version(value) if isinstance(value, str) else value

    def _fail_if_sentinel(self, operation: str, target: str) -> None:
        if self.config.sentinel in target:
            logger.debug("Simulating %s failure for %s", operation, target)
            raise SimulatedFailureError(operation, target)

    def _record_chart(self, chart: str) -> None:
        with guarded(self.charts_lock):
            self.charts.append(chart)

    def _record_release(self, name: str, flags: tuple[str, ...]) -> None:
        with guarded(self.releases_lock):
            self.releases.append(ReleaseRecord(name=name, flags=flags))

    # Chart dependencies

    def update_deps(self, chart: str) -> None:
        self._fail_if_sentinel("update_deps", chart)
        self._record_chart(chart)
        logger.debug("Recorded update_deps for %s", chart)

        if self.update_deps_callbacks is not None:
            callback = self.update_deps_callbacks.get(chart)
            if callback is not None:
                callback(chart)

    def build_deps(self, name: str, chart: str, *flags: str) -> None:
        self._fail_if_sentinel("build_deps", chart)
        self._record_chart(chart)
        logger.debug("Recorded build_deps for %s (%s)", name, chart)

    # Binary configuration

    def set_extra_args(self, *args: str) -> None:
        self.extra_args = args

    def set_helm_binary(self, binary: str) -> None:
        self.helm_binary = binary

    def set_enable_live_output(self, enable_live_output: bool) -> None:
        self.enable_live_output = enable_live_output

    def set_disable_force_update(self, disable_force_update: bool) -> None:
        self.disable_force_update = disable_force_update

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
        """Store the full argument tuple in ``repo`` for exact-match assertions.

        Booleans are rendered as ``true``/``false``.
        """
        self.repo = [
            name,
            repository,
            cafile,
            certfile,
            keyfile,
            username,
            password,
            managed,
            str(pass_credentials).lower(),
            str(skip_tls_verify).lower(),
        ]

    def update_repo(self) -> None:
        pass

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
        pass

    # Releases

    def sync_release(
        self, context: HelmContext, name: str, chart: str, *flags: str
    ) -> None:
        self._fail_if_sentinel("sync_release", name)
        # Each list is guarded separately; never hold both locks at once.
        self._record_release(name, flags)
        self._record_chart(chart)
        logger.debug("Recorded sync_release for %s (%s)", name, chart)

    def diff_release(
        self,
        context: HelmContext,
        name: str,
        chart: str,
        suppress_diff: bool,
        *flags: str,
    ) -> None:
        """Record the diff, then resolve it against ``diffs``.

        Raises:
            BaseException: The exception registered for this key, verbatim.
            UnexpectedCallError: Strict mode and no registered key matches.
        """
        with guarded(self.diff_lock):
            self.diffed.append(ReleaseRecord(name=name, flags=flags))

        if self.diffs is None:
            return

        key = DiffKey(name=name, chart=chart, flags=join_flags(flags))
        if key not in self.diffs:
            if self.fail_on_unexpected_diff:
                logger.debug("No diff expectation for %s", key)
                raise UnexpectedCallError("diff", key)
            return

        err = self.diffs[key]
        if err is not None:
            raise err

    def release_status(self, context: HelmContext, name: str, *flags: str) -> None:
        self._fail_if_sentinel("release_status", name)
        self._record_release(name, flags)

    def delete_release(self, context: HelmContext, name: str, *flags: str) -> None:
        self._fail_if_sentinel("delete_release", name)
        self.deleted.append(ReleaseRecord(name=name, flags=flags))
        logger.debug("Recorded delete_release for %s", name)

    def list(self, context: HelmContext, filter: str, *flags: str) -> str:
        """Resolve a list call against ``lists``.

        Returns:
            The registered output, the placeholder when no expectations are
            configured, or an empty string for a lenient miss.

        Raises:
            UnexpectedCallError: Strict mode and no registered key matches.
                The message lists every configured key.
        """
        key = ListKey(filter=filter, flags=join_flags(flags))

        if self.lists is None:
            return self.config.list_placeholder

        if key in self.lists:
            return self.lists[key]
        if self.fail_on_unexpected_list:
            logger.debug("No list expectation for %s", key)
            raise UnexpectedCallError("list", key, list(self.lists))
        return ""

    def decrypt_secret(self, context: HelmContext, name: str, *flags: str) -> str:
        return ""

    def test_release(self, context: HelmContext, name: str, *flags: str) -> None:
        self._fail_if_sentinel("test_release", name)
        self._record_release(name, flags)

    # Charts

    def fetch(self, chart: str, *flags: str) -> None:
        pass

    def lint(self, name: str, chart: str, *flags: str) -> None:
        self._fail_if_sentinel("lint", name)
        self.linted.append(ReleaseRecord(name=name, flags=flags))

    def template_release(self, name: str, chart: str, *flags: str) -> None:
        self._fail_if_sentinel("template_release", name)
        self.templated.append(ReleaseRecord(name=name, flags=flags))

    def chart_pull(self, chart: str, path: str, *flags: str) -> None:
        pass

    def chart_export(self, chart: str, path: str) -> None:
        pass

    def show_chart(self, chart_path: str) -> ChartMetadata:
        try:
            return self.chart_metadata[chart_path]
        except KeyError:
            raise ChartNotFoundError(chart_path) from None

    # Version

    def is_helm3(self) -> bool:
        if self.version is None:
            return self.helm3
        return self.version.major == 3

    def get_version(self) -> ToolVersion:
        if self.version is None:
            return ToolVersion(major=0, minor=0, patch=0)
        return ToolVersion(
            major=self.version.major,
            minor=self.version.minor,
            patch=self.version.patch,
        )

    def is_version_at_least(self, version: str) -> bool:
        """Compare the configured version against ``version``.

        An unknown version is never new enough.

        Raises:
            MalformedVersionError: ``version`` is not a valid version string.
        """
        if self.version is None:
            return False
        return self.version.compare(parse_version(version)) >= 0
