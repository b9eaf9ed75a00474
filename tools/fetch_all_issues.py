from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path


def _add_project_to_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


_add_project_to_syspath()

from jira_rest import JiraRestClient, credential_from_env, decode_summary, get_all_issues


async def _run(jql: str, fields: list[str]) -> int:
    credential = credential_from_env()
    async with JiraRestClient() as client:
        issues = await get_all_issues(client, credential, jql, fields)
    for issue in issues:
        summary = decode_summary(issue) if "summary" in issue.fields else ""
        print(f"{issue.key}\t{summary}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print every Jira issue matching a JQL query (reads JIRA_* env vars)."
    )
    parser.add_argument("jql", help='JQL query, e.g. \'project = "ABC"\'')
    parser.add_argument(
        "--fields",
        default="summary",
        help="Comma-separated issue fields to request (default: summary)",
    )
    args = parser.parse_args()

    fields = [f for f in args.fields.split(",") if f.strip()]
    return asyncio.run(_run(args.jql, fields))


if __name__ == "__main__":
    raise SystemExit(main())
