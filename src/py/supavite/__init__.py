"""Supavite: Vite React projects with Supabase authentication.

This package scaffolds a Vite React application, installs the Supabase client
and writes a ready-to-use sign-in component for Google or Slack.

Basic usage::

    $ supavite
    Enter your project name: myapp
    Do you want Supabase authentication? (yes/no): yes
    Which provider do you want to use? (google/slack): slack

Programmatic usage::

    from pathlib import Path
    from supavite import Provider, ScaffoldConfig, SessionConfig, get_executor, scaffold_project

    session = SessionConfig(project_name="myapp", auth_enabled=True, provider=Provider.GOOGLE)
    scaffold_project(session, get_executor("npm"), Path.cwd(), ScaffoldConfig())
"""

from supavite.__metadata__ import __version__
from supavite.commands import print_next_steps, scaffold_project
from supavite.config import LoggingConfig, ScaffoldConfig
from supavite.executor import CommandResult, JSExecutor, get_executor
from supavite.session import Provider, SessionConfig, provider_token

__all__ = (
    "CommandResult",
    "JSExecutor",
    "LoggingConfig",
    "Provider",
    "ScaffoldConfig",
    "SessionConfig",
    "__version__",
    "get_executor",
    "print_next_steps",
    "provider_token",
    "scaffold_project",
)
