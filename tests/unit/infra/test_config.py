"""Tests for FakeHelmConfig."""

import pytest

from chartexec.infra.io.config import (
    DEFAULT_LIST_PLACEHOLDER,
    DEFAULT_SENTINEL,
    ConfigurationError,
    FakeHelmConfig,
)


class TestFakeHelmConfig:
    def test_defaults(self) -> None:
        config = FakeHelmConfig()
        assert config.sentinel == DEFAULT_SENTINEL == "error"
        assert config.list_placeholder == DEFAULT_LIST_PLACEHOLDER
        assert config.fail_on_unexpected_diff is False
        assert config.fail_on_unexpected_list is False
        assert config.validate() == []

    def test_empty_sentinel_invalid(self) -> None:
        assert FakeHelmConfig(sentinel="").validate() == [
            "sentinel must be a non-empty string"
        ]


class TestFromEnv:
    def test_defaults_without_env(self) -> None:
        assert FakeHelmConfig.from_env() == FakeHelmConfig()

    def test_reads_all_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHARTEXEC_SENTINEL", "__boom__")
        monkeypatch.setenv("CHARTEXEC_LIST_PLACEHOLDER", "NAME")
        monkeypatch.setenv("CHARTEXEC_STRICT_DIFF", "true")
        monkeypatch.setenv("CHARTEXEC_STRICT_LIST", "1")

        config = FakeHelmConfig.from_env()

        assert config == FakeHelmConfig(
            sentinel="__boom__",
            list_placeholder="NAME",
            fail_on_unexpected_diff=True,
            fail_on_unexpected_list=True,
        )

    @pytest.mark.parametrize("raw", ["0", "false", "No", " off "])
    def test_false_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("CHARTEXEC_STRICT_DIFF", raw)
        assert FakeHelmConfig.from_env().fail_on_unexpected_diff is False

    def test_invalid_values_collected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHARTEXEC_STRICT_DIFF", "maybe")
        monkeypatch.setenv("CHARTEXEC_STRICT_LIST", "sometimes")
        monkeypatch.setenv("CHARTEXEC_SENTINEL", "")

        with pytest.raises(ConfigurationError) as exc_info:
            FakeHelmConfig.from_env()

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert "CHARTEXEC_STRICT_DIFF" in errors[0]
        assert "CHARTEXEC_STRICT_LIST" in errors[1]
        assert "Configuration validation failed" in str(exc_info.value)

    def test_skip_validation_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHARTEXEC_STRICT_LIST", "maybe")
        monkeypatch.setenv("CHARTEXEC_SENTINEL", "")

        config = FakeHelmConfig.from_env(validate=False)

        assert config.fail_on_unexpected_list is False
        assert config.sentinel == DEFAULT_SENTINEL
