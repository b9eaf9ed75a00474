from __future__ import annotations

from typing import Any, Dict, Optional

from jira_rest.errors import DecodeError
from jira_rest.models import JiraUser


def expect_dict(obj: Any, path: str) -> Dict[str, Any]:
    if not isinstance(obj, dict):
        raise DecodeError(f"Expected object at {path}")
    return obj


def expect_str(obj: Any, path: str) -> str:
    if not isinstance(obj, str):
        raise DecodeError(f"Expected string at {path}")
    value = obj.strip()
    if not value:
        raise DecodeError(f"Expected non-empty string at {path}")
    return value


def maybe_str(obj: Any, path: str) -> Optional[str]:
    if obj is None:
        return None
    if not isinstance(obj, str):
        raise DecodeError(f"Expected string at {path}")
    return obj.strip() or None


def expect_int(obj: Any, path: str) -> int:
    if not isinstance(obj, int) or isinstance(obj, bool):
        raise DecodeError(f"Expected integer at {path}")
    return obj


def maybe_user(obj: Any, path: str) -> Optional[JiraUser]:
    if obj is None:
        return None
    raw = expect_dict(obj, path)
    return JiraUser(
        account_id=expect_str(raw.get("accountId"), f"{path}.accountId"),
        display_name=expect_str(raw.get("displayName"), f"{path}.displayName"),
        email=maybe_str(raw.get("emailAddress"), f"{path}.emailAddress"),
    )
