"""Supavite exception classes."""

__all__ = [
    "CommandExecutionError",
    "ExecutableNotFoundError",
    "InputValidationError",
    "InvalidProjectNameError",
    "SupaviteError",
    "UnsupportedProviderError",
]


class SupaviteError(Exception):
    """Base exception for Supavite related errors."""


class ExecutableNotFoundError(SupaviteError):
    """Raised when the package manager executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class CommandExecutionError(SupaviteError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int) -> None:
        super().__init__(f"Command {' '.join(command)!r} failed with return code {return_code}.")
        self.command = command
        self.return_code = return_code


class InputValidationError(SupaviteError):
    """Raised when an interactive answer is rejected."""


class InvalidProjectNameError(InputValidationError):
    """Raised when the project name is empty."""

    def __init__(self) -> None:
        super().__init__("Project name is required.")


class UnsupportedProviderError(InputValidationError):
    """Raised when the selected authentication provider is not supported."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Invalid provider selected: {provider!r}. Expected one of: google, slack.")
        self.provider = provider
