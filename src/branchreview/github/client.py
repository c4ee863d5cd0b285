"""Async GitHub REST API client."""

from __future__ import annotations

import json
from typing import Any

import httpx

from branchreview import __version__
from branchreview.exceptions import APIError
from branchreview.github.models import ReviewRequest, ReviewRequestResult

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
TIMEOUT_SECONDS = 30.0


def _error_message(response: httpx.Response) -> str:
    """Build an error message the way GitHub clients usually report it."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if not isinstance(data, dict) or not data.get("message"):
        return f"HTTP {response.status_code}"

    message = data["message"]
    errors = data.get("errors")
    if errors:
        message += ": " + ", ".join(json.dumps(e) for e in errors)
    if data.get("documentation_url"):
        message += f" - {data['documentation_url']}"
    return message


class GitHubClient:
    """Thin async wrapper around the GitHub REST API."""

    def __init__(self, token: str | None = None, base_url: str = DEFAULT_API_URL) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": f"branchreview/{__version__}",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubClient:
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=TIMEOUT_SECONDS,
        )
        return self

    async def __aexit__(self, *_: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _post(self, path: str, body: dict[str, Any]) -> Any:
        if self._client is None:
            raise RuntimeError("Client not initialised, use it as an async context manager")
        try:
            response = await self._client.post(path, json=body)
        except httpx.HTTPError as e:
            raise APIError(str(e) or e.__class__.__name__) from e
        if response.is_error:
            raise APIError(_error_message(response), status_code=response.status_code)
        return response.json()

    async def request_reviewers(self, request: ReviewRequest) -> ReviewRequestResult:
        """Request reviewers and team reviewers on a pull request."""
        path = (
            f"/repos/{request.owner}/{request.repo}"
            f"/pulls/{request.pull_number}/requested_reviewers"
        )
        data = await self._post(path, request.body())
        return ReviewRequestResult.model_validate(data)
