import logging
import os
from pathlib import Path

import pytest

from jira_rest import (
    InvalidCredentialsError,
    JiraRestClient,
    credential_from_env,
    get_all_projects,
    get_issues,
    make_config,
    make_request,
)


def _load_dotenv_if_present() -> None:
    env_path = Path(__file__).resolve().parents[2] / ".env"
    if not env_path.exists():
        return
    for raw in env_path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        value = value.strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        os.environ[key] = value


@pytest.mark.anyio
async def test_live_jira_rest_smoke():
    _load_dotenv_if_present()
    if not os.getenv("JIRA_BASE_URL"):
        pytest.skip("Integration credentials not provided")

    credential = credential_from_env()
    logger = logging.getLogger("jira_rest.integration")
    async with JiraRestClient(timeout_seconds=30.0, logger=logger) as client:
        try:
            projects = await get_all_projects(client, credential)
        except InvalidCredentialsError as exc:
            pytest.fail(f"Jira rejected the configured credentials; {exc}")

        for project in projects:
            assert project.id
            assert project.key
        if not projects:
            return

        page = await get_issues(
            client,
            credential,
            make_request(make_config(5), 1),
            f"project = {projects[0].id}",
            ["summary"],
        )
        assert len(page.items) <= page.max_results
