from __future__ import annotations

from typing import Any, Mapping

from jira_rest.errors import DecodeError
from jira_rest.models import Issue

from .common import expect_dict, expect_str, maybe_str


def decode_issue(payload: Any) -> Issue:
    raw = expect_dict(payload, "issue")
    fields = raw.get("fields")
    if fields is None:
        fields = {}
    return Issue(
        id=expect_str(raw.get("id"), "issue.id"),
        key=expect_str(raw.get("key"), "issue.key"),
        fields=expect_dict(fields, "issue.fields"),
        self_url=maybe_str(raw.get("self"), "issue.self"),
    )


def summary_decoder(fields: Mapping[str, Any]) -> str:
    summary = fields.get("summary")
    if not isinstance(summary, str):
        raise DecodeError("Expected string at issue.fields.summary")
    return summary


def decode_summary(issue: Issue) -> str:
    return issue.decode_fields(summary_decoder)
