from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

_LOGGER_NAME = "jira_rest"
_SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "set-cookie",
        "proxy-authorization",
        "x-api-key",
    }
)
_MASK = "***"

HeaderSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def get_logger(logger: Optional[logging.Logger] = None) -> logging.Logger:
    if logger is not None:
        return logger
    return logging.getLogger(_LOGGER_NAME)


def sanitize_headers(headers: HeaderSource) -> Dict[str, str]:
    items = headers.items() if hasattr(headers, "items") else headers
    cleaned: Dict[str, str] = {}
    for key, value in items:
        if key.lower() in _SENSITIVE_HEADERS:
            cleaned[key] = _MASK
        else:
            cleaned[key] = value
    return cleaned
