"""Package manager executors.

This module provides executor classes for the JavaScript package managers
(npm, pnpm, Yarn, Bun) used to create the Vite project and add dependencies.
Every command runs synchronously with the child's streams attached to ours, so
the generator's own prompts stay interactive.
"""

import platform
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from supavite.exceptions import CommandExecutionError, ExecutableNotFoundError
from supavite.utils import format_command, logger

__all__ = (
    "BunExecutor",
    "CommandExecutor",
    "CommandResult",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful command."""

    command: list[str]
    cwd: Path
    return_code: int = 0


class JSExecutor(ABC):
    """Abstract base class for Javascript package manager executors."""

    bin_name: ClassVar[str]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @abstractmethod
    def execute(self, args: list[str], cwd: Path) -> CommandResult:
        """Execute a command and wait for it to finish."""

    @abstractmethod
    def create_args(self, project_name: str, template: str) -> list[str]:
        """Arguments that scaffold a Vite project."""

    @abstractmethod
    def add_args(self, packages: "list[str]") -> list[str]:
        """Arguments that add packages to the current project."""

    def create(self, project_name: str, template: str, cwd: Path) -> CommandResult:
        """Create a Vite project named ``project_name`` inside ``cwd``."""
        return self.execute(self.create_args(project_name, template), cwd)

    def add(self, packages: "list[str]", cwd: Path) -> CommandResult:
        """Add ``packages`` to the project at ``cwd``."""
        return self.execute(self.add_args(packages), cwd)

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    @property
    def install_command(self) -> list[str]:
        """Get the command that installs the project's dependencies (e.g., npm install)."""
        return [self.bin_name, "install"]

    @property
    def dev_command(self) -> list[str]:
        """Get the command that starts the dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]


class CommandExecutor(JSExecutor):
    """Generic command executor."""

    def create_args(self, project_name: str, template: str) -> list[str]:
        return ["create", "vite", project_name, "--template", template]

    def add_args(self, packages: "list[str]") -> list[str]:
        return ["add", *packages]

    def execute(self, args: list[str], cwd: Path) -> CommandResult:
        executable = self._resolve_executable()
        # Avoid double-prefixing the executable when callers pass it explicitly
        command = args if args and Path(args[0]).name == Path(executable).name else [executable, *args]
        logger.debug("Running %s in %s", format_command(command), cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdin=None,  # inherit so the generator can prompt
            stdout=None,
            stderr=None,
        )
        if process.returncode != 0:
            raise CommandExecutionError(command, process.returncode)
        return CommandResult(command=command, cwd=cwd, return_code=process.returncode)


class NodeExecutor(CommandExecutor):
    """Node.js executor."""

    bin_name = "npm"

    def create_args(self, project_name: str, template: str) -> list[str]:
        # npm forwards flags to the initializer only after "--"
        return ["create", "vite@latest", project_name, "--", "--template", template]

    def add_args(self, packages: "list[str]") -> list[str]:
        return ["install", *packages]


class PnpmExecutor(CommandExecutor):
    """PNPM executor."""

    bin_name = "pnpm"


class YarnExecutor(CommandExecutor):
    """Yarn executor."""

    bin_name = "yarn"

    @property
    def dev_command(self) -> list[str]:
        return [self.bin_name, "dev"]


class BunExecutor(CommandExecutor):
    """Bun executor."""

    bin_name = "bun"


_EXECUTORS: "dict[str, type[JSExecutor]]" = {
    "npm": NodeExecutor,
    "pnpm": PnpmExecutor,
    "yarn": YarnExecutor,
    "bun": BunExecutor,
}


def get_executor(name: str, executable_path: "Path | str | None" = None) -> JSExecutor:
    """Build the executor registered under ``name``.

    Raises:
        ValueError: If no executor is registered for ``name``.

    Returns:
        The executor instance.
    """
    try:
        executor_cls = _EXECUTORS[name]
    except KeyError:
        msg = f"Unknown executor {name!r}. Expected one of: {', '.join(_EXECUTORS)}"
        raise ValueError(msg) from None
    return executor_cls(executable_path)
