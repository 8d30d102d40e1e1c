"""Tests for supavite.session module."""

import dataclasses

import pytest

from supavite.exceptions import InputValidationError, InvalidProjectNameError, UnsupportedProviderError
from supavite.session import (
    Provider,
    SessionConfig,
    parse_auth_answer,
    parse_project_name,
    parse_provider,
    provider_token,
)

# =====================================================
# Provider token mapping
# =====================================================


def test_provider_token_slack_uses_oidc() -> None:
    assert provider_token(Provider.SLACK) == "slack_oidc"


def test_provider_token_google_is_verbatim() -> None:
    assert provider_token(Provider.GOOGLE) == "google"


def test_provider_token_rejects_none() -> None:
    with pytest.raises(ValueError):
        provider_token(Provider.NONE)


def test_provider_label() -> None:
    assert Provider.GOOGLE.label == "Google"
    assert Provider.SLACK.label == "Slack"


# =====================================================
# Answer parsing
# =====================================================


@pytest.mark.parametrize("answer", ["", "   ", "\t"])
def test_parse_project_name_empty(answer: str) -> None:
    with pytest.raises(InvalidProjectNameError, match="Project name is required"):
        parse_project_name(answer)


def test_parse_project_name_strips() -> None:
    assert parse_project_name("  myapp \n") == "myapp"


@pytest.mark.parametrize("answer", ["yes", "YES", "Yes", " yes "])
def test_parse_auth_answer_yes(answer: str) -> None:
    assert parse_auth_answer(answer) is True


@pytest.mark.parametrize("answer", ["no", "", "y", "yeah", "true", "nope"])
def test_parse_auth_answer_anything_else_is_no(answer: str) -> None:
    assert parse_auth_answer(answer) is False


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("google", Provider.GOOGLE), ("Google", Provider.GOOGLE), ("SLACK", Provider.SLACK), (" slack ", Provider.SLACK)],
)
def test_parse_provider_supported(answer: str, expected: Provider) -> None:
    assert parse_provider(answer) is expected


@pytest.mark.parametrize("answer", ["github", "", "none", "slack_oidc"])
def test_parse_provider_unsupported(answer: str) -> None:
    with pytest.raises(UnsupportedProviderError) as exc_info:
        parse_provider(answer)

    assert isinstance(exc_info.value, InputValidationError)
    assert "Invalid provider selected" in str(exc_info.value)


# =====================================================
# SessionConfig invariants
# =====================================================


def test_session_config_defaults() -> None:
    session = SessionConfig(project_name="myapp")
    assert session.auth_enabled is False
    assert session.provider is Provider.NONE


def test_session_config_is_frozen() -> None:
    session = SessionConfig(project_name="myapp")
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.project_name = "other"  # type: ignore[misc]


def test_session_config_requires_name() -> None:
    with pytest.raises(InvalidProjectNameError):
        SessionConfig(project_name="")


def test_session_config_auth_requires_provider() -> None:
    with pytest.raises(ValueError):
        SessionConfig(project_name="myapp", auth_enabled=True)


def test_session_config_provider_requires_auth() -> None:
    with pytest.raises(ValueError):
        SessionConfig(project_name="myapp", provider=Provider.SLACK)
