from __future__ import annotations

from typing import Dict, List, Sequence, Union

from .aggregate import fetch_all
from .client import JiraRestClient
from .credentials import Credential
from .mappers.issues import decode_issue
from .models import Issue
from .pagination import Page, PageRequest

ALL_FIELDS = "*all"
SEARCH_PROPERTIES = "id,key,summary"


def all_fields() -> List[str]:
    return [ALL_FIELDS]


def all_fields_except(excluded: Sequence[str]) -> List[str]:
    """Field scope selecting every field but ``excluded``.

    ``all_fields_except(["comment"])`` yields ``["*all", "-comment"]``.
    """
    scope = all_fields()
    for name in excluded:
        cleaned = name.strip()
        if cleaned:
            scope.append(f"-{cleaned}")
    return scope


async def get_issues(
    client: JiraRestClient,
    credential: Credential,
    page_request: PageRequest,
    jql: str,
    fields: Sequence[str],
) -> Page[Issue]:
    field_list = [f.strip() for f in fields if f and f.strip()]
    if not field_list:
        raise ValueError("fields must be non-empty")

    params: Dict[str, Union[str, int]] = {
        "jql": jql,
        "fields": ",".join(field_list),
        "properties": SEARCH_PROPERTIES,
    }
    params.update(page_request.to_query_params())
    payload = await client.get_json(credential, "/search", params=params)
    return Page.decode(decode_issue, payload)


async def get_full_issues(
    client: JiraRestClient,
    credential: Credential,
    page_request: PageRequest,
    jql: str,
) -> Page[Issue]:
    return await get_issues(client, credential, page_request, jql, all_fields())


async def get_all_issues(
    client: JiraRestClient,
    credential: Credential,
    jql: str,
    fields: Sequence[str],
) -> List[Issue]:
    async def fetch_page(cred: Credential, request: PageRequest) -> Page[Issue]:
        return await get_issues(client, cred, request, jql, fields)

    return await fetch_all(fetch_page, credential)


async def get_all_full_issues(
    client: JiraRestClient,
    credential: Credential,
    jql: str,
) -> List[Issue]:
    return await get_all_issues(client, credential, jql, all_fields())
