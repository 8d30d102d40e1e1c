"""Project scaffolding generator.

This module renders the project templates from a ``SessionConfig`` and
writes them into the generated project.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader
from rich.markup import escape

from supavite.scaffolding.templates import get_project_files
from supavite.session import Provider, provider_token
from supavite.utils import console, logger

if TYPE_CHECKING:
    from supavite.session import SessionConfig

URL_ENV_VAR = "VITE_SUPABASE_URL"
ANON_KEY_ENV_VAR = "VITE_SUPABASE_ANON_KEY"
URL_PLACEHOLDER = "https://your-supabase-url.supabase.co"
ANON_KEY_PLACEHOLDER = "your-anon-key"


@dataclass(frozen=True)
class TemplateContext:
    """Context variables for template rendering.

    Attributes:
        project_name: Name of the project
        auth_enabled: Whether Supabase authentication is generated
        provider: The selected sign-in provider
        url_env_var: Env variable holding the Supabase project URL
        anon_key_env_var: Env variable holding the anonymous key
        url_placeholder: Example value written to ``.env``
        anon_key_placeholder: Example value written to ``.env``
    """

    project_name: str
    auth_enabled: bool = False
    provider: Provider = Provider.NONE
    url_env_var: str = URL_ENV_VAR
    anon_key_env_var: str = ANON_KEY_ENV_VAR
    url_placeholder: str = URL_PLACEHOLDER
    anon_key_placeholder: str = ANON_KEY_PLACEHOLDER

    @classmethod
    def from_session(cls, session: "SessionConfig") -> "TemplateContext":
        return cls(project_name=session.project_name, auth_enabled=session.auth_enabled, provider=session.provider)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        auth = self.auth_enabled and self.provider is not Provider.NONE
        return {
            "project_name": self.project_name,
            "auth_enabled": self.auth_enabled,
            "provider": self.provider.value,
            "provider_token": provider_token(self.provider) if auth else None,
            "provider_label": self.provider.label if auth else None,
            "url_env_var": self.url_env_var,
            "anon_key_env_var": self.anon_key_env_var,
            "url_placeholder": self.url_placeholder,
            "anon_key_placeholder": self.anon_key_placeholder,
        }


def get_template_dir() -> Path:
    """Get the directory containing the project templates.

    Returns:
        Path to the templates directory.
    """
    return Path(__file__).parent.parent / "templates"


def render_template(template_name: str, context: TemplateContext) -> str:
    """Render a Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is
    source code and configuration files, not HTML.

    Args:
        template_name: Template file name inside the templates directory.
        context: Template context.

    Returns:
        Rendered template content.
    """
    env = Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,  # noqa: S701
    )
    template = env.get_template(template_name)
    return template.render(**context.to_dict())


def render_client_config(context: TemplateContext) -> str:
    """Render ``src/supabaseConfig.js``, which reads the URL and key from the Vite env."""
    return render_template("supabaseConfig.js.j2", context)


def render_auth_component(context: TemplateContext) -> str:
    """Render ``src/Auth.jsx`` with the provider token baked into the sign-in call."""
    return render_template("Auth.jsx.j2", context)


def render_env_file(context: TemplateContext) -> str:
    return render_template("env.j2", context)


def render_root_app(context: TemplateContext) -> str:
    """Render ``src/App.jsx``; it only imports ``./Auth`` when authentication is enabled."""
    return render_template("App.jsx.j2", context)


def generate_project(project_dir: Path, session: "SessionConfig") -> list[Path]:
    """Render and write the project files for a session.

    Existing files (the generator's ``App.jsx``) are overwritten. Write errors
    propagate and already written files are left in place.

    Args:
        project_dir: Root of the generated project.
        session: The validated session answers.

    Returns:
        List of written file paths.
    """
    context = TemplateContext.from_session(session)
    generated_files: list[Path] = []

    for project_file in get_project_files(session):
        output_path = project_dir / project_file.output
        _render_and_write(project_file.template, output_path, context)
        generated_files.append(output_path)

    return generated_files


def _render_and_write(template_name: str, output_path: Path, context: TemplateContext) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)

    content = render_template(template_name, context)
    output_path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", output_path, len(content))
    console.print(f"[green]Created {escape(str(output_path))}[/]")
