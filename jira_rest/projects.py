from __future__ import annotations

from typing import List

from .aggregate import fetch_all
from .client import JiraRestClient
from .credentials import Credential
from .mappers.projects import decode_project
from .models import Project
from .pagination import Page, PageRequest


async def get_projects(
    client: JiraRestClient,
    credential: Credential,
    page_request: PageRequest,
) -> Page[Project]:
    payload = await client.get_json(
        credential,
        "/project/search",
        params=page_request.to_query_params(),
    )
    return Page.decode(decode_project, payload)


async def get_all_projects(client: JiraRestClient, credential: Credential) -> List[Project]:
    async def fetch_page(cred: Credential, request: PageRequest) -> Page[Project]:
        return await get_projects(client, cred, request)

    return await fetch_all(fetch_page, credential)
