from __future__ import annotations

import os
from typing import Optional

from .credentials import Credential, anonymous, basic_auth
from .errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


def _getenv(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip():
            return value.strip()
    return None


def strict_url_from_env() -> bool:
    return (os.getenv("JIRA_STRICT_URL") or "").strip().lower() in _TRUTHY


def credential_from_env() -> Credential:
    base_url = _getenv("JIRA_BASE_URL")
    if not base_url:
        raise ConfigurationError("Missing Jira site URL. Set JIRA_BASE_URL.")

    username = _getenv("JIRA_USERNAME", "JIRA_EMAIL")
    password = _getenv("JIRA_API_TOKEN", "JIRA_PASSWORD")
    strict_url = strict_url_from_env()

    if username is None and password is None:
        return anonymous(base_url, strict_url=strict_url)
    return basic_auth(base_url, username or "", password or "", strict_url=strict_url)
