"""Project scaffolding module for supavite.

This module renders the Supabase client, the authentication component, the
``.env`` example and the root ``App.jsx`` into a Vite React project.
"""

from supavite.scaffolding.generator import (
    TemplateContext,
    generate_project,
    render_auth_component,
    render_client_config,
    render_env_file,
    render_root_app,
)
from supavite.scaffolding.templates import PROJECT_FILES, ProjectFile, get_project_files

__all__ = [
    "PROJECT_FILES",
    "ProjectFile",
    "TemplateContext",
    "generate_project",
    "get_project_files",
    "render_auth_component",
    "render_client_config",
    "render_env_file",
    "render_root_app",
]
