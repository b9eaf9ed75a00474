import pytest

from jira_rest.credentials import AnonymousCredential, BasicAuthCredential
from jira_rest.env import credential_from_env
from jira_rest.errors import ConfigurationError

_VARS = (
    "JIRA_BASE_URL",
    "JIRA_USERNAME",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "JIRA_PASSWORD",
    "JIRA_STRICT_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_missing_base_url(monkeypatch):
    with pytest.raises(ConfigurationError, match="JIRA_BASE_URL"):
        credential_from_env()


def test_anonymous_when_no_secrets(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://example.atlassian.net")
    cred = credential_from_env()
    assert isinstance(cred, AnonymousCredential)
    assert cred.base_url == "https://example.atlassian.net/rest/api/3"


def test_basic_auth_with_email_fallback(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://example.atlassian.net/")
    monkeypatch.setenv("JIRA_EMAIL", "user@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "apitoken")
    cred = credential_from_env()
    assert isinstance(cred, BasicAuthCredential)
    assert cred.username == "user@example.com"


def test_half_configured_basic_auth_fails(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://example.atlassian.net")
    monkeypatch.setenv("JIRA_PASSWORD", "secret")
    with pytest.raises(ConfigurationError, match="Username must not be empty"):
        credential_from_env()


def test_strict_url_flag(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "example")
    assert isinstance(credential_from_env(), AnonymousCredential)
    monkeypatch.setenv("JIRA_STRICT_URL", "true")
    with pytest.raises(ConfigurationError, match="Invalid URL"):
        credential_from_env()
