"""Session inputs and their validation.

A scaffolding session is described by a single immutable ``SessionConfig``
built from the answers the user typed at the prompts.
"""

from dataclasses import dataclass
from enum import Enum

from supavite.exceptions import InvalidProjectNameError, UnsupportedProviderError

__all__ = (
    "Provider",
    "SessionConfig",
    "parse_auth_answer",
    "parse_project_name",
    "parse_provider",
    "provider_token",
)


class Provider(str, Enum):
    """Supported sign-in providers."""

    NONE = "none"
    GOOGLE = "google"
    SLACK = "slack"

    @property
    def label(self) -> str:
        """Display name for the sign-in button."""
        return self.value.capitalize()


SUPPORTED_PROVIDERS = (Provider.GOOGLE, Provider.SLACK)


@dataclass(frozen=True)
class SessionConfig:
    """Validated answers for one scaffolding session.

    Attributes:
        project_name: Directory name of the generated project.
        auth_enabled: Whether Supabase authentication files are generated.
        provider: Sign-in provider, ``Provider.NONE`` unless ``auth_enabled``.
    """

    project_name: str
    auth_enabled: bool = False
    provider: Provider = Provider.NONE

    def __post_init__(self) -> None:
        if not self.project_name:
            raise InvalidProjectNameError
        if self.auth_enabled and self.provider not in SUPPORTED_PROVIDERS:
            msg = f"Authentication requires one of {[p.value for p in SUPPORTED_PROVIDERS]}, got {self.provider.value!r}"
            raise ValueError(msg)
        if not self.auth_enabled and self.provider is not Provider.NONE:
            msg = f"Provider {self.provider.value!r} given without authentication enabled"
            raise ValueError(msg)


def parse_project_name(answer: str) -> str:
    """Normalize the project name answer.

    Raises:
        InvalidProjectNameError: If the answer is empty or whitespace only.

    Returns:
        The stripped project name.
    """
    name = answer.strip()
    if not name:
        raise InvalidProjectNameError
    return name


def parse_auth_answer(answer: str) -> bool:
    """Return True only for a case-insensitive ``yes``; anything else means no."""
    return answer.strip().lower() == "yes"


def parse_provider(answer: str) -> Provider:
    """Validate the provider answer.

    Raises:
        UnsupportedProviderError: If the answer is not ``google`` or ``slack``.

    Returns:
        The matching provider.
    """
    value = answer.strip().lower()
    for provider in SUPPORTED_PROVIDERS:
        if provider.value == value:
            return provider
    raise UnsupportedProviderError(answer)


def provider_token(provider: Provider) -> str:
    """Map a provider to the identifier Supabase expects in ``signInWithOAuth``.

    Slack sign-in goes through its OpenID Connect variant.

    Raises:
        ValueError: If called with ``Provider.NONE``.

    Returns:
        The provider token.
    """
    if provider is Provider.NONE:
        msg = "No provider token without an authentication provider"
        raise ValueError(msg)
    return "slack_oidc" if provider is Provider.SLACK else provider.value
