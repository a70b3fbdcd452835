"""Optional locking for shared recorder state.

Fakes are shared between single-threaded unit tests and tests that drive the
orchestrator's parallel dispatch. Locks are injected only in the latter, so
callers hold a guard that may be absent.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chartexec.core.protocols import MutexGuard

__all__ = ["guarded"]


def guarded(lock: MutexGuard | None) -> AbstractContextManager[object]:
    """Return a context that holds ``lock`` for its duration.

    Args:
        lock: Guard to acquire, or None to run unguarded.

    Returns:
        The lock itself when present, otherwise a no-op context.
    """
    if lock is None:
        return nullcontext()
    return lock  # type: ignore[return-value]
