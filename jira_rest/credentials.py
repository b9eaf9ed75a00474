from __future__ import annotations

import base64
import re
from dataclasses import dataclass, field
from typing import MutableMapping, Union

from .errors import ConfigurationError

API_PATH = "rest/api/3"

_HOST_URL_PATTERN = re.compile(
    r"^https?://"
    r"(localhost|([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63})"
    r"(:\d{1,5})?"
    r"(/\S*)?$"
)


def normalize_base_url(url: str) -> str:
    """Append the REST API version segment to a site URL.

    ``https://example.atlassian.net`` and ``https://example.atlassian.net/``
    both become ``https://example.atlassian.net/rest/api/3``.
    """
    if url.endswith("/"):
        return f"{url}{API_PATH}"
    return f"{url}/{API_PATH}"


def _require_normalized(base_url: str) -> None:
    if not base_url.endswith(f"/{API_PATH}"):
        raise ConfigurationError(
            f"base_url must end in /{API_PATH}; build credentials with anonymous() or basic_auth()"
        )


def _validated_base_url(url: str, strict_url: bool) -> str:
    if strict_url and not _HOST_URL_PATTERN.match(url or ""):
        raise ConfigurationError("Invalid URL")
    return normalize_base_url(url or "")


def _join(base_url: str, path: str) -> str:
    cleaned_path = path if path.startswith("/") else f"/{path}"
    return f"{base_url}{cleaned_path}"


@dataclass(frozen=True)
class AnonymousCredential:
    """Unauthenticated access. ``base_url`` must already be normalized."""

    base_url: str

    def __post_init__(self) -> None:
        _require_normalized(self.base_url)

    def apply(self, headers: MutableMapping[str, str]) -> None:
        return None

    def url_for(self, path: str) -> str:
        return _join(self.base_url, path)


@dataclass(frozen=True)
class BasicAuthCredential:
    base_url: str
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_normalized(self.base_url)
        if not self.username and not self.password:
            raise ConfigurationError("Username and password must not be empty")
        if not self.username:
            raise ConfigurationError("Username must not be empty")
        if not self.password:
            raise ConfigurationError("Password must not be empty")

    def apply(self, headers: MutableMapping[str, str]) -> None:
        raw = f"{self.username}:{self.password}".encode("utf-8")
        headers["Authorization"] = f"Basic {base64.b64encode(raw).decode('ascii')}"

    def url_for(self, path: str) -> str:
        return _join(self.base_url, path)


Credential = Union[AnonymousCredential, BasicAuthCredential]


def anonymous(url: str, *, strict_url: bool = False) -> AnonymousCredential:
    return AnonymousCredential(base_url=_validated_base_url(url, strict_url))


def basic_auth(
    url: str,
    username: str,
    password: str,
    *,
    strict_url: bool = False,
) -> BasicAuthCredential:
    return BasicAuthCredential(
        base_url=_validated_base_url(url, strict_url),
        username=username,
        password=password,
    )
