"""Tests for supavite.config module."""

import logging

import pytest
from rich.logging import RichHandler

from supavite.config import DEFAULT_DEPENDENCIES, LoggingConfig, ScaffoldConfig
from supavite.utils import configure_logging, format_command, logger


def test_scaffold_config_defaults() -> None:
    config = ScaffoldConfig()

    assert config.executor == "npm"
    assert config.executable_path is None
    assert config.template == "react"
    assert config.dependencies == ("react", "react-dom", "@supabase/supabase-js")
    assert config.logging.level == "normal"


def test_scaffold_config_executor_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPAVITE_EXECUTOR", " PNPM ")
    assert ScaffoldConfig().executor == "pnpm"


def test_scaffold_config_blank_executor_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPAVITE_EXECUTOR", "")
    assert ScaffoldConfig().executor == "npm"


def test_scaffold_config_invalid_executor_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPAVITE_EXECUTOR", "deno")
    with pytest.raises(ValueError, match="Invalid SUPAVITE_EXECUTOR"):
        ScaffoldConfig()


def test_scaffold_config_explicit_executor_skips_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPAVITE_EXECUTOR", "bun")
    assert ScaffoldConfig(executor="yarn").executor == "yarn"


def test_scaffold_config_executable_path_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPAVITE_EXECUTABLE_PATH", "/opt/node/bin/npm")
    assert ScaffoldConfig().executable_path == "/opt/node/bin/npm"


def test_default_dependencies_are_unpinned() -> None:
    assert all("@" not in dependency.lstrip("@") for dependency in DEFAULT_DEPENDENCIES)


@pytest.mark.parametrize(
    ("env_value", "expected"),
    [("quiet", "quiet"), ("VERBOSE", "verbose"), ("normal", "normal"), ("loud", "normal"), ("", "normal")],
)
def test_logging_config_level_from_env(monkeypatch: pytest.MonkeyPatch, env_value: str, expected: str) -> None:
    monkeypatch.setenv("SUPAVITE_LOG_LEVEL", env_value)
    assert LoggingConfig().level == expected


@pytest.mark.parametrize(
    ("level", "expected"),
    [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
)
def test_configure_logging_sets_level(level: str, expected: int) -> None:
    configure_logging(LoggingConfig(level=level))  # type: ignore[arg-type]

    assert logger.level == expected
    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1


def test_configure_logging_is_idempotent() -> None:
    configure_logging(LoggingConfig(level="normal"))
    configure_logging(LoggingConfig(level="verbose"))

    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_format_command() -> None:
    assert format_command(["npm", "run", "dev"]) == "npm run dev"
    assert format_command(None) == ""
