from __future__ import annotations

from typing import Union

from .client import JiraRestClient
from .credentials import Credential
from .mappers.worklogs import decode_worklog, encode_worklog_request
from .models import Issue, Worklog, WorklogRequest


def _issue_ref(issue: Union[Issue, str]) -> str:
    if isinstance(issue, Issue):
        return issue.key
    ref = (issue or "").strip()
    if not ref:
        raise ValueError("issue key or id is required")
    return ref


async def add_worklog(
    client: JiraRestClient,
    credential: Credential,
    issue: Union[Issue, str],
    request: WorklogRequest,
) -> Worklog:
    payload = await client.post_json(
        credential,
        f"/issue/{_issue_ref(issue)}/worklog",
        encode_worklog_request(request),
    )
    return decode_worklog(payload)
