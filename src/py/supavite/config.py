"""Scaffolder configuration."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

__all__ = (
    "DEFAULT_DEPENDENCIES",
    "EXECUTOR_NAMES",
    "LoggingConfig",
    "ScaffoldConfig",
    "get_default_executor",
    "get_default_log_level",
)

EXECUTOR_NAMES = ("npm", "pnpm", "yarn", "bun")
DEFAULT_DEPENDENCIES = ("react", "react-dom", "@supabase/supabase-js")

_LOG_LEVELS: "dict[str, int]" = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks SUPAVITE_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("SUPAVITE_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


def get_default_executor() -> str:
    """Resolve the package manager from SUPAVITE_EXECUTOR.

    Raises:
        ValueError: If an unknown package manager is configured.

    Returns:
        The executor name, ``npm`` when unset.
    """
    env_value = os.getenv("SUPAVITE_EXECUTOR")
    if env_value is None or not env_value.strip():
        return "npm"
    name = env_value.strip().lower()
    if name not in EXECUTOR_NAMES:
        msg = f"Invalid SUPAVITE_EXECUTOR: {env_value!r}. Expected one of: {', '.join(EXECUTOR_NAMES)}"
        raise ValueError(msg)
    return name


@dataclass
class LoggingConfig:
    """Logging configuration for console output.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Errors only
            - "normal": Warnings and errors (default)
            - "verbose": Every executed command and written file
            Can also be set via SUPAVITE_LOG_LEVEL environment variable.
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    @property
    def log_level(self) -> int:
        """The standard library level matching ``level``."""
        return _LOG_LEVELS[self.level]


@dataclass
class ScaffoldConfig:
    """Settings for a scaffolding run.

    Attributes:
        executor: Package manager used to create the project and add dependencies.
        executable_path: Explicit path to the package manager binary.
        template: Vite template identifier passed to the generator.
        dependencies: Packages added to the generated project.
        logging: Console logging settings.
    """

    executor: str = field(default_factory=get_default_executor)
    executable_path: "str | None" = field(default_factory=lambda: os.getenv("SUPAVITE_EXECUTABLE_PATH") or None)
    template: str = "react"
    dependencies: "tuple[str, ...]" = DEFAULT_DEPENDENCIES
    logging: LoggingConfig = field(default_factory=LoggingConfig)
