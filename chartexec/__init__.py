"""chartexec: helm executor protocol and recording fakes for orchestration tests."""

from .fakes.helm import FakeHelm

__version__ = "0.1.0"
__all__ = ["FakeHelm", "__version__"]
