"""Event context supplied by the GitHub Actions runner."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, ValidationError

from branchreview.exceptions import ContextError

PULL_REQUEST_EVENTS = ("pull_request", "pull_request_target")


class Repository(NamedTuple):
    owner: str
    name: str


class BranchRef(BaseModel):
    ref: str


class PullRequest(BaseModel):
    """The slice of a pull request payload this action reads."""

    number: int
    base: BranchRef

    @property
    def base_ref(self) -> str:
        return self.base.ref


class EventContext(BaseModel):
    """The triggering event of a workflow run."""

    event_name: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)
    repository: str = ""

    @property
    def is_pull_request_event(self) -> bool:
        return self.event_name in PULL_REQUEST_EVENTS

    @property
    def pull_request(self) -> PullRequest | None:
        data = self.payload.get("pull_request")
        if not data:
            return None
        try:
            return PullRequest.model_validate(data)
        except ValidationError as e:
            raise ContextError(f"Invalid pull request in event payload: {e}") from e

    @property
    def repo(self) -> Repository:
        """Owner and name of the repository the event belongs to."""
        if self.repository:
            owner, _, name = self.repository.partition("/")
            return Repository(owner, name)

        repository = self.payload.get("repository") or {}
        owner = (repository.get("owner") or {}).get("login")
        name = repository.get("name")
        if owner and name:
            return Repository(owner, name)

        raise ContextError(
            "Repository requires a GITHUB_REPOSITORY environment variable like 'owner/repo'"
        )


def load_event_payload(event_path: str | None) -> dict[str, Any]:
    """Load the webhook payload written by the runner. A missing file reads as empty."""
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ContextError(f"Could not parse event payload {event_path}: {e}") from e
    if not isinstance(payload, dict):
        raise ContextError(f"Event payload {event_path} is not a JSON object")
    return payload


def load_context(env: Mapping[str, str] | None = None) -> EventContext:
    """Build the event context from the runner's environment variables."""
    env = os.environ if env is None else env
    return EventContext(
        event_name=env.get("GITHUB_EVENT_NAME", ""),
        payload=load_event_payload(env.get("GITHUB_EVENT_PATH")),
        repository=env.get("GITHUB_REPOSITORY", ""),
    )
