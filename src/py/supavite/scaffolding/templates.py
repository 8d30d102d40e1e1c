"""Generated file definitions for scaffolding.

This module lists the files written into a freshly generated Vite project.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from supavite.session import SessionConfig


@dataclass(frozen=True)
class ProjectFile:
    """A file rendered into the generated project.

    Attributes:
        template: Template file name inside the package ``templates`` directory
        output: Path of the written file, relative to the project root
        requires_auth: Only written when Supabase authentication is enabled
    """

    template: str
    output: str
    requires_auth: bool = False


# App.jsx is last so it is only rewritten once the files it imports exist.
PROJECT_FILES: tuple[ProjectFile, ...] = (
    ProjectFile(template="supabaseConfig.js.j2", output="src/supabaseConfig.js", requires_auth=True),
    ProjectFile(template="Auth.jsx.j2", output="src/Auth.jsx", requires_auth=True),
    ProjectFile(template="env.j2", output=".env", requires_auth=True),
    ProjectFile(template="App.jsx.j2", output="src/App.jsx"),
)


def get_project_files(session: "SessionConfig") -> list[ProjectFile]:
    """Get the files to write for a session.

    Args:
        session: The validated session answers.

    Returns:
        The project files in write order.
    """
    return [project_file for project_file in PROJECT_FILES if session.auth_enabled or not project_file.requires_auth]
