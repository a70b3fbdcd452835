"""I/O utilities for chartexec.

This package contains:
- config: FakeHelmConfig dataclass for configuration management
"""

from chartexec.infra.io.config import ConfigurationError, FakeHelmConfig

__all__ = [
    "ConfigurationError",
    "FakeHelmConfig",
]
