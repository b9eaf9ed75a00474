from __future__ import annotations

from typing import Any, Optional

from jira_rest.models import Project

from .common import expect_dict, expect_str, maybe_str


def _normalize_project_type(value: str) -> str:
    return value.strip().upper().replace("-", "_").replace(" ", "_")


def decode_project(payload: Any) -> Project:
    raw = expect_dict(payload, "project")

    project_type: Optional[str] = None
    raw_type = maybe_str(raw.get("projectTypeKey"), "project.projectTypeKey")
    if raw_type:
        project_type = _normalize_project_type(raw_type)

    return Project(
        id=expect_str(raw.get("id"), "project.id"),
        key=expect_str(raw.get("key"), "project.key"),
        name=expect_str(raw.get("name"), "project.name"),
        self_url=maybe_str(raw.get("self"), "project.self"),
        project_type=project_type,
    )
