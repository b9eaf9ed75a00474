from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class JiraUser:
    account_id: str
    display_name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class Project:
    id: str
    key: str
    name: str
    self_url: Optional[str] = None
    project_type: Optional[str] = None


@dataclass(frozen=True)
class Issue:
    id: str
    key: str
    fields: Mapping[str, Any] = field(default_factory=dict, compare=False)
    self_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def decode_fields(self, decoder: Callable[[Mapping[str, Any]], T]) -> T:
        return decoder(self.fields)


@dataclass(frozen=True)
class Worklog:
    id: str
    issue_id: str
    started: datetime
    time_spent_seconds: int
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    author: Optional[JiraUser] = None
    self_url: Optional[str] = None


@dataclass(frozen=True)
class WorklogRequest:
    started: datetime
    time_spent_seconds: int
    comment: Optional[str] = None
