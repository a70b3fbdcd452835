"""Unit tests for the optional lock helper."""

import threading

import pytest

from chartexec.infra.tools.locking import guarded


@pytest.mark.unit
class TestGuarded:
    def test_holds_lock_inside_block(self) -> None:
        lock = threading.Lock()
        with guarded(lock):
            assert lock.locked()
        assert not lock.locked()

    def test_releases_on_exception(self) -> None:
        lock = threading.Lock()
        with pytest.raises(RuntimeError), guarded(lock):
            raise RuntimeError("boom")
        assert not lock.locked()

    def test_none_is_noop(self) -> None:
        with guarded(None) as value:
            assert value is None
