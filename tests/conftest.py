"""Shared test fixtures for branchreview."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from branchreview.github.models import ReviewRequest, ReviewRequestResult
from branchreview.ui.console import Console


def pull_request_event(number: int = 123, base_ref: str = "main") -> dict[str, Any]:
    """A trimmed-down pull_request webhook payload."""
    return {
        "action": "opened",
        "number": number,
        "pull_request": {
            "number": number,
            "title": "Add feature",
            "base": {"ref": base_ref, "sha": "abc1234"},
            "head": {"ref": "feature", "sha": "def5678"},
            "user": {"login": "author"},
        },
        "repository": {
            "name": "test-repo",
            "full_name": "test-owner/test-repo",
            "owner": {"login": "test-owner"},
        },
    }


def read_outputs(path: Path) -> dict[str, str]:
    """Parse the heredoc entries of a GITHUB_OUTPUT file."""
    outputs: dict[str, str] = {}
    if not path.exists():
        return outputs
    lines = path.read_text(encoding="utf-8").splitlines()
    i = 0
    while i < len(lines):
        name, _, delimiter = lines[i].partition("<<")
        i += 1
        value_lines = []
        while lines[i] != delimiter:
            value_lines.append(lines[i])
            i += 1
        outputs[name] = "\n".join(value_lines)
        i += 1
    return outputs


class FakeGitHubClient:
    """Stands in for GitHubClient; records every review request."""

    def __init__(self, response: dict[str, Any] | None = None, error: Exception | None = None):
        self.response = response or {}
        self.error = error
        self.tokens: list[str] = []
        self.requests: list[ReviewRequest] = []

    def __call__(self, token: str) -> FakeGitHubClient:
        self.tokens.append(token)
        return self

    async def __aenter__(self) -> FakeGitHubClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        pass

    async def request_reviewers(self, request: ReviewRequest) -> ReviewRequestResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return ReviewRequestResult.model_validate(self.response)


@pytest.fixture
def event_path(tmp_path: Path) -> Path:
    """An event payload file for a pull request into main."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(pull_request_event()))
    return path


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    return tmp_path / "github_output"


@pytest.fixture
def action_env(event_path: Path, output_path: Path) -> dict[str, str]:
    """Runner environment for a pull_request event with all inputs set."""
    return {
        "GITHUB_EVENT_NAME": "pull_request",
        "GITHUB_EVENT_PATH": str(event_path),
        "GITHUB_REPOSITORY": "test-owner/test-repo",
        "GITHUB_OUTPUT": str(output_path),
        "INPUT_BRANCH": "main",
        "INPUT_REVIEWERS": "user1,user2",
        "INPUT_TEAM-REVIEWERS": "team1",
        "INPUT_TOKEN": "mock-token",
    }


@pytest.fixture
def log() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(log: io.StringIO) -> Console:
    return Console(file=log)
