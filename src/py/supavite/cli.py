import sys
from pathlib import Path
from typing import NoReturn, Optional

from click import Choice, command, option, version_option
from click import Path as ClickPath
from rich.markup import escape
from rich.prompt import Prompt

from supavite.__metadata__ import __version__
from supavite.commands import print_next_steps, scaffold_project
from supavite.config import EXECUTOR_NAMES, LoggingConfig, ScaffoldConfig
from supavite.exceptions import InputValidationError, SupaviteError
from supavite.executor import get_executor
from supavite.session import (
    Provider,
    SessionConfig,
    parse_auth_answer,
    parse_project_name,
    parse_provider,
)
from supavite.utils import configure_logging, console, err_console, logger


def _prompt_for_session() -> SessionConfig:
    """Ask for the project name, the auth choice and the provider.

    Raises:
        InputValidationError: If the name is empty or the provider unsupported.

    Returns:
        The validated session.
    """
    project_name = parse_project_name(Prompt.ask("Enter your project name", console=console))
    auth_enabled = parse_auth_answer(Prompt.ask("Do you want Supabase authentication? (yes/no)", console=console))
    provider = Provider.NONE
    if auth_enabled:
        provider = parse_provider(Prompt.ask("Which provider do you want to use? (google/slack)", console=console))
    return SessionConfig(project_name=project_name, auth_enabled=auth_enabled, provider=provider)


def _build_config(executor: "Optional[str]", verbose: bool, quiet: bool) -> ScaffoldConfig:
    config = ScaffoldConfig() if executor is None else ScaffoldConfig(executor=executor)
    if verbose:
        config.logging = LoggingConfig(level="verbose")
    elif quiet:
        config.logging = LoggingConfig(level="quiet")
    return config


def _abort(error: "Exception | str") -> NoReturn:
    err_console.print(f"[red]{escape(str(error))}[/]", highlight=False, soft_wrap=True)
    sys.exit(1)


@command(
    name="supavite",
    help="Create a Vite React app with optional Supabase authentication.",
)
@option(
    "--root-path",
    type=ClickPath(dir_okay=True, file_okay=False, exists=True, path_type=Path),
    help="The directory the new project folder is created in.  Defaults to the current directory.",
    default=None,
    required=False,
)
@option(
    "--executor",
    type=Choice(EXECUTOR_NAMES),
    help="Package manager used to create the project and install dependencies.",
    default=None,
    required=False,
)
@option(
    "--no-install",
    help="Do not install the React and Supabase packages after creating the project.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("--quiet", type=bool, help="Only log errors.", default=False, is_flag=True)
@version_option(version=__version__, prog_name="supavite")
def create_app(
    root_path: "Optional[Path]",
    executor: "Optional[str]",
    no_install: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Run an interactive scaffolding session."""
    try:
        config = _build_config(executor, verbose, quiet)
    except ValueError as e:
        _abort(e)
    configure_logging(config.logging)

    console.print("Welcome to Vite React App Generator with Supabase Auth!")
    try:
        session = _prompt_for_session()
    except InputValidationError as e:
        _abort(e)
    logger.debug("Session: %s", session)

    js_executor = get_executor(config.executor, config.executable_path)
    root_path = Path(root_path or Path.cwd())
    try:
        scaffold_project(session, js_executor, root_path, config, install=not no_install)
    except (SupaviteError, OSError) as e:
        logger.debug("Project setup failed", exc_info=True)
        _abort(f"Error during project setup: {e!s}")

    print_next_steps(session.project_name, js_executor)


def main() -> None:
    create_app()
