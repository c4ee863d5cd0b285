"""Reviewer assignment for pull requests targeting a configured branch.

This is the step the GitHub Action runs. It:
1. Reads and validates the action inputs
2. Skips events that are not pull requests, or pull requests whose base
   branch is not the configured one
3. Requests the configured reviewers and team reviewers on the pull request
4. Publishes the reviewers actually added as step outputs

Every failure is reported through the console's failure channel; ``run``
itself never raises.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from branchreview.config import load_inputs
from branchreview.exceptions import ContextError
from branchreview.github.client import DEFAULT_API_URL, GitHubClient
from branchreview.github.context import EventContext, load_context
from branchreview.github.models import ReviewRequest
from branchreview.github.outputs import OutputWriter
from branchreview.ui.console import Console

STATUS_ASSIGNED = "assigned"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"

OUTPUT_REVIEWERS_ADDED = "reviewers-added"
OUTPUT_TEAMS_ADDED = "teams-added"

ClientFactory = Callable[[str], GitHubClient]


@dataclass
class AssignmentResult:
    """Outcome of one run."""

    status: str
    reviewers_added: list[str] = field(default_factory=list)
    teams_added: list[str] = field(default_factory=list)
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED


def failure_message(error: BaseException) -> str:
    """The message reported for an error; falls back to the error type."""
    return str(error) or error.__class__.__name__


class ReviewerAssignment:
    """Requests reviewers on pull requests that target a configured branch."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        console: Console | None = None,
        outputs: OutputWriter | None = None,
        context: EventContext | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.env = os.environ if env is None else env
        self.console = console or Console()
        self.outputs = outputs or OutputWriter(self.env, self.console)
        self.context = context
        self.client_factory = client_factory or self._default_client

    def _default_client(self, token: str) -> GitHubClient:
        return GitHubClient(token, base_url=self.env.get("GITHUB_API_URL") or DEFAULT_API_URL)

    async def run(self) -> AssignmentResult:
        try:
            return await self._assign()
        except Exception as e:
            message = failure_message(e)
            self.console.set_failed(message)
            return AssignmentResult(status=STATUS_FAILED, message=message)

    async def _assign(self) -> AssignmentResult:
        inputs = load_inputs(self.env)
        context = self.context if self.context is not None else load_context(self.env)

        if not context.is_pull_request_event:
            message = "This action only runs on pull request events"
            self.console.info(message)
            return AssignmentResult(status=STATUS_SKIPPED, message=message)

        pull_request = context.pull_request
        if pull_request is None:
            raise ContextError("Could not get pull request from context")

        pr_branch = pull_request.base_ref
        self.console.info(f"Pull request target branch: {pr_branch}")
        self.console.info(f"Configured target branch: {inputs.branch}")

        if pr_branch != inputs.branch:
            message = (
                f"Target branch {pr_branch} does not match configured branch "
                f"{inputs.branch}. Skipping reviewer assignment."
            )
            self.console.info(message)
            return AssignmentResult(status=STATUS_SKIPPED, message=message)

        self.console.info(f"Reviewers to add: {', '.join(inputs.reviewers)}")
        if inputs.team_reviewers:
            self.console.info(f"Team reviewers to add: {', '.join(inputs.team_reviewers)}")

        owner, repo = context.repo
        request = ReviewRequest(
            owner=owner,
            repo=repo,
            pull_number=pull_request.number,
            reviewers=inputs.reviewers,
            team_reviewers=inputs.team_reviewers,
        )
        self.console.debug(f"Request reviewers payload: {request.to_json()}")

        if not inputs.token:
            self.console.warning("No token provided, the review request will be unauthenticated")

        async with self.client_factory(inputs.token) as client:
            result = await client.request_reviewers(request)

        added_reviewers = result.logins
        added_teams = result.slugs

        self.outputs.set_output(OUTPUT_REVIEWERS_ADDED, ",".join(added_reviewers))
        self.outputs.set_output(OUTPUT_TEAMS_ADDED, ",".join(added_teams))

        self.console.success(f"Successfully added reviewers: {', '.join(added_reviewers)}")
        if added_teams:
            self.console.success(f"Successfully added team reviewers: {', '.join(added_teams)}")

        return AssignmentResult(
            status=STATUS_ASSIGNED,
            reviewers_added=added_reviewers,
            teams_added=added_teams,
        )
