"""Helpers for building JQL filter expressions.

Only the pieces the search operations need are provided: equality clauses,
conjunction and ordering. Values passed to :func:`equals_expression` are
inserted verbatim, so quoting them is the caller's job.
"""

from __future__ import annotations

from .models import Project


def escape_literal(value: str) -> str:
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def equals_string(field: str, value: str) -> str:
    return f"{field} = {escape_literal(value)}"


def equals_expression(field: str, raw_expression: str) -> str:
    return f"{field} = {raw_expression}"


def for_project(project: Project) -> str:
    return equals_expression("project", project.id)


def all_of(*clauses: str) -> str:
    cleaned = [c.strip() for c in clauses if c and c.strip()]
    if not cleaned:
        raise ValueError("at least one clause is required")
    return " AND ".join(cleaned)


def order_by(expression: str, field: str, *, descending: bool = False) -> str:
    direction = "DESC" if descending else "ASC"
    return f"{expression} ORDER BY {field} {direction}"
