"""Configuration dataclass for chartexec fakes.

Provides FakeHelmConfig so test suites can construct fake behavior
programmatically, or share one setup across a CI matrix via from_env().

Environment Variables:
    CHARTEXEC_SENTINEL: Substring that forces simulated failures (default: error)
    CHARTEXEC_LIST_PLACEHOLDER: Output returned by list when no expectations are set
    CHARTEXEC_STRICT_DIFF: Fail on diffs with no registered expectation
    CHARTEXEC_STRICT_LIST: Fail on lists with no registered expectation
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SENTINEL = "error"
DEFAULT_LIST_PLACEHOLDER = "dummy non-empty helm-list output"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: str | None, *, source: str, errors: list[str]) -> bool:
    if raw is None or not raw.strip():
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    errors.append(f"{source}: expected a boolean, got '{raw}'")
    return False


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        super().__init__(message)


@dataclass(frozen=True)
class FakeHelmConfig:
    """Behavior settings for FakeHelm.

    Attributes:
        sentinel: Substring whose presence in a release name or chart
            reference makes mutating operations fail.
            Env: CHARTEXEC_SENTINEL (default: "error")
        list_placeholder: Output of list() when no list expectations exist.
            Env: CHARTEXEC_LIST_PLACEHOLDER
        fail_on_unexpected_diff: Raise on diffs with no registered expectation.
            Env: CHARTEXEC_STRICT_DIFF (default: False)
        fail_on_unexpected_list: Raise on lists with no registered expectation.
            Env: CHARTEXEC_STRICT_LIST (default: False)

    Example:
        config = FakeHelmConfig(fail_on_unexpected_diff=True)
        helm = FakeHelm(config=config)
    """

    sentinel: str = DEFAULT_SENTINEL
    list_placeholder: str = DEFAULT_LIST_PLACEHOLDER
    fail_on_unexpected_diff: bool = False
    fail_on_unexpected_list: bool = False

    def validate(self) -> list[str]:
        """Return a list of validation errors (empty when valid)."""
        errors: list[str] = []
        if not self.sentinel:
            errors.append("sentinel must be a non-empty string")
        return errors

    @classmethod
    def from_env(cls, *, validate: bool = True) -> FakeHelmConfig:
        """Create FakeHelmConfig from environment variables.

        Args:
            validate: If True (default), raise ConfigurationError on invalid
                values. Set to False to fall back to defaults silently.

        Returns:
            FakeHelmConfig with values from the environment or defaults.

        Raises:
            ConfigurationError: If validate=True and configuration is invalid.
        """
        parse_errors: list[str] = []
        sentinel = os.environ.get("CHARTEXEC_SENTINEL", DEFAULT_SENTINEL)
        list_placeholder = os.environ.get(
            "CHARTEXEC_LIST_PLACEHOLDER", DEFAULT_LIST_PLACEHOLDER
        )
        strict_diff = _parse_bool(
            os.environ.get("CHARTEXEC_STRICT_DIFF"),
            source="CHARTEXEC_STRICT_DIFF",
            errors=parse_errors,
        )
        strict_list = _parse_bool(
            os.environ.get("CHARTEXEC_STRICT_LIST"),
            source="CHARTEXEC_STRICT_LIST",
            errors=parse_errors,
        )

        config = cls(
            sentinel=sentinel,
            list_placeholder=list_placeholder,
            fail_on_unexpected_diff=strict_diff,
            fail_on_unexpected_list=strict_list,
        )

        if validate:
            errors = parse_errors + config.validate()
            if errors:
                raise ConfigurationError(errors)
        elif not config.sentinel:
            config = cls(
                list_placeholder=list_placeholder,
                fail_on_unexpected_diff=strict_diff,
                fail_on_unexpected_list=strict_list,
            )
        return config
