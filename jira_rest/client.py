from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional, Union

import httpx

from .credentials import Credential
from .errors import DecodeError, InvalidCredentialsError, TransportError
from .logging import get_logger, sanitize_headers

QueryParams = Dict[str, Union[str, int]]

_DEFAULT_USER_AGENT = "jira-rest-python/0.1.0"


class JiraRestClient:
    def __init__(
        self,
        *,
        timeout_seconds: Optional[float] = None,
        logger=None,
        user_agent: Optional[str] = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        self._logger = get_logger(logger)
        self._owns_client = http_client is None
        self._client = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(timeout=timeout_seconds)
        )
        self._user_agent = user_agent or _DEFAULT_USER_AGENT
        self._base_headers: list[tuple[str, str]] = [
            ("Accept", "application/json"),
            ("User-Agent", self._user_agent),
        ]

    def _build_headers(self, credential: Credential) -> httpx.Headers:
        headers = httpx.Headers(list(self._base_headers))
        credential.apply(headers)
        return headers

    async def get_json(
        self,
        credential: Credential,
        path: str,
        *,
        params: Optional[QueryParams] = None,
    ) -> Dict[str, Any]:
        return await self._request("GET", credential, path, params=params)

    async def post_json(
        self,
        credential: Credential,
        path: str,
        body: Dict[str, Any],
    ) -> Dict[str, Any]:
        return await self._request("POST", credential, path, body=body)

    async def _request(
        self,
        method: str,
        credential: Credential,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        if credential is None:
            raise ValueError("credential is required")
        if not path or not isinstance(path, str) or not path.strip():
            raise ValueError("path is required")
        url = credential.url_for(path)
        headers = self._build_headers(credential)

        start = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                params=params,
                json=body,
            )
        except httpx.RequestError as exc:
            self._logger.error("HTTP request failed", exc_info=exc)
            raise TransportError(status_code=0, body_snippet=str(exc)) from exc

        try:
            duration = time.perf_counter() - start
            self._logger.debug(
                "Jira REST request completed",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_sec": round(duration, 4),
                    "headers": sanitize_headers(headers),
                },
            )

            if response.status_code == 401:
                raise InvalidCredentialsError(
                    "Jira rejected the supplied credentials (HTTP 401); log in again"
                )
            if response.status_code >= 400:
                raise TransportError(
                    status_code=response.status_code,
                    body_snippet=response.text[:200],
                )

            try:
                payload = response.json()
            except json.JSONDecodeError as exc:
                raise DecodeError(f"Failed to parse JSON: {exc}") from exc

            if not isinstance(payload, dict):
                raise DecodeError("Expected object JSON response")
            return payload
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "JiraRestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
