"""In-memory fake implementations for testing.

Fakes are preferred over mocks because they:

1. Implement real protocol contracts, catching interface mismatches at test time
2. Provide deterministic, predictable behavior without call-order dependencies
3. Enable behavior-based testing (assert outputs/state) over interaction testing

Available fakes:
- FakeHelm: Recording helm executor with keyed expectations and sentinel failures

Usage:
    from chartexec.core.models import DiffKey
    from chartexec.fakes import FakeHelm

    def test_something():
        helm = FakeHelm(diffs={DiffKey("app", "chart", ""): None})
        # test code that uses helm
"""

from chartexec.fakes.helm import FakeHelm, UpdateDepsCallback

__all__ = ["FakeHelm", "UpdateDepsCallback"]
