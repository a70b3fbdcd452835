"""Contract test for FakeHelm protocol completeness.

Ensures FakeHelm implements every member of HelmExecutorPort.
"""

import inspect

import pytest

from chartexec.core.models import HelmContext
from chartexec.core.protocols import HelmExecutorPort, MutexGuard
from chartexec.fakes import FakeHelm
from tests.contracts import get_protocol_members


@pytest.mark.unit
def test_fake_helm_implements_all_protocol_members() -> None:
    """FakeHelm must define every member declared by HelmExecutorPort."""
    members = get_protocol_members(HelmExecutorPort)
    missing = {name for name in members if not hasattr(FakeHelm, name)}
    assert not missing, f"FakeHelm missing protocol members: {sorted(missing)}"


@pytest.mark.unit
def test_fake_helm_signatures_match_protocol() -> None:
    """Parameter names and kinds match so callers can pass keywords."""
    for name in get_protocol_members(HelmExecutorPort):
        expected = inspect.signature(getattr(HelmExecutorPort, name))
        actual = inspect.signature(getattr(FakeHelm, name))
        expected_params = [(p.name, p.kind) for p in expected.parameters.values()]
        actual_params = [(p.name, p.kind) for p in actual.parameters.values()]
        assert actual_params == expected_params, name


@pytest.mark.unit
def test_fake_helm_is_runtime_instance_of_port() -> None:
    assert isinstance(FakeHelm(), HelmExecutorPort)


@pytest.mark.unit
def test_threading_lock_satisfies_mutex_guard() -> None:
    import threading

    assert isinstance(threading.Lock(), MutexGuard)
    assert isinstance(threading.RLock(), MutexGuard)


@pytest.mark.unit
def test_context_is_pass_through() -> None:
    """The execution context never changes the outcome of a call."""
    a = FakeHelm()
    b = FakeHelm()

    a.sync_release(HelmContext(), "app", "chart", "--wait")
    b.sync_release(HelmContext(history_max=10, worker_index=3), "app", "chart", "--wait")

    assert a.releases == b.releases
    assert a.charts == b.charts
