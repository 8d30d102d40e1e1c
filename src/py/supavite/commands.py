"""Scaffolding session commands.

This module runs the steps of a session once the answers are validated:
create the Vite project, add the dependencies, then write the templates.
"""

from typing import TYPE_CHECKING

from rich.markup import escape

from supavite.scaffolding import generate_project
from supavite.utils import console, format_command, logger

if TYPE_CHECKING:
    from pathlib import Path

    from supavite.config import ScaffoldConfig
    from supavite.executor import JSExecutor
    from supavite.session import SessionConfig

__all__ = ("print_next_steps", "scaffold_project")


def scaffold_project(
    session: "SessionConfig",
    executor: "JSExecutor",
    root_path: "Path",
    config: "ScaffoldConfig",
    *,
    install: bool = True,
) -> "list[Path]":
    """Create the project and write the Supabase templates into it.

    The generator runs in ``root_path``; everything afterwards runs inside
    ``root_path / session.project_name``.

    Args:
        session: The validated session answers.
        executor: Package manager used for the generator and the dependencies.
        root_path: Directory the project is created in.
        config: Scaffolder settings.
        install: Whether to add the dependencies.

    Raises:
        CommandExecutionError: If the generator or the installer exits non-zero.
        OSError: If a template cannot be written.

    Returns:
        The written template files.
    """
    project_path = root_path / session.project_name

    console.rule("[yellow]Creating Vite React app[/]", align="left")
    executor.create(session.project_name, config.template, cwd=root_path)

    if install:
        console.rule("[yellow]Initializing project dependencies[/]", align="left")
        executor.add(list(config.dependencies), cwd=project_path)
    else:
        logger.info("Skipping dependency installation for %s", project_path)

    if session.auth_enabled:
        console.rule("[yellow]Setting up Supabase authentication[/]", align="left")
    generated_files = generate_project(project_path, session)
    if session.auth_enabled:
        console.print("Supabase configuration and authentication setup completed.")
    return generated_files


def print_next_steps(project_name: str, executor: "JSExecutor") -> None:
    console.print("\n[bold green]Project setup complete![/] To get started:")
    console.print(f"\n  cd {escape(project_name)}")
    console.print(f"  {format_command(executor.install_command)}")
    console.print(f"  {format_command(executor.dev_command)}")
