from .aggregate import fetch_all
from .client import JiraRestClient
from .credentials import (
    AnonymousCredential,
    BasicAuthCredential,
    Credential,
    anonymous,
    basic_auth,
)
from .env import credential_from_env
from .errors import (
    ConfigurationError,
    DecodeError,
    HttpTransportError,
    InvalidCredentialsError,
    TransportError,
)
from .issues import (
    all_fields,
    all_fields_except,
    get_all_full_issues,
    get_all_issues,
    get_full_issues,
    get_issues,
)
from .jql import all_of, equals_expression, equals_string, escape_literal, for_project, order_by
from .mappers.issues import decode_summary
from .models import Issue, JiraUser, Project, Worklog, WorklogRequest
from .pagination import (
    Page,
    PageRequest,
    PaginationConfig,
    decode_page,
    make_config,
    make_request,
    map_page,
    next_page,
    to_query_params,
)
from .projects import get_all_projects, get_projects
from .timestamps import format_timestamp, parse_timestamp
from .worklogs import add_worklog

__version__ = "0.1.0"

__all__ = [
    "JiraRestClient",
    "Credential",
    "AnonymousCredential",
    "BasicAuthCredential",
    "anonymous",
    "basic_auth",
    "credential_from_env",
    "TransportError",
    "HttpTransportError",
    "InvalidCredentialsError",
    "DecodeError",
    "ConfigurationError",
    "PaginationConfig",
    "PageRequest",
    "Page",
    "make_config",
    "make_request",
    "to_query_params",
    "decode_page",
    "next_page",
    "map_page",
    "fetch_all",
    "escape_literal",
    "equals_string",
    "equals_expression",
    "for_project",
    "all_of",
    "order_by",
    "JiraUser",
    "Project",
    "Issue",
    "Worklog",
    "WorklogRequest",
    "decode_summary",
    "parse_timestamp",
    "format_timestamp",
    "get_projects",
    "get_all_projects",
    "get_issues",
    "get_full_issues",
    "get_all_issues",
    "get_all_full_issues",
    "all_fields",
    "all_fields_except",
    "add_worklog",
]
