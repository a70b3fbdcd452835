"""Tools package: locking utilities."""

from chartexec.infra.tools.locking import guarded

__all__ = ["guarded"]
