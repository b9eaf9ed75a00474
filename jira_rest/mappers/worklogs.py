from __future__ import annotations

from typing import Any, Dict, Optional

from jira_rest.errors import DecodeError
from jira_rest.models import Worklog, WorklogRequest
from jira_rest.timestamps import format_timestamp, parse_timestamp

from .common import expect_dict, expect_int, expect_str, maybe_str, maybe_user


def decode_worklog(payload: Any) -> Worklog:
    raw = expect_dict(payload, "worklog")

    tss = expect_int(raw.get("timeSpentSeconds"), "worklog.timeSpentSeconds")
    if tss < 0:
        raise DecodeError("worklog.timeSpentSeconds must be >= 0")

    created = raw.get("created")
    updated = raw.get("updated")
    return Worklog(
        id=expect_str(raw.get("id"), "worklog.id"),
        issue_id=expect_str(raw.get("issueId"), "worklog.issueId"),
        started=parse_timestamp(raw.get("started"), "worklog.started"),
        time_spent_seconds=tss,
        created=parse_timestamp(created, "worklog.created") if created is not None else None,
        updated=parse_timestamp(updated, "worklog.updated") if updated is not None else None,
        author=maybe_user(raw.get("author"), "worklog.author"),
        self_url=maybe_str(raw.get("self"), "worklog.self"),
    )


def _comment_document(text: str) -> Dict[str, Any]:
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }


def encode_worklog_request(request: WorklogRequest) -> Dict[str, Any]:
    if request.time_spent_seconds <= 0:
        raise ValueError("time_spent_seconds must be > 0")
    body: Dict[str, Any] = {
        "started": format_timestamp(request.started),
        "timeSpentSeconds": request.time_spent_seconds,
    }
    comment: Optional[str] = request.comment
    if comment:
        body["comment"] = _comment_document(comment)
    return body
