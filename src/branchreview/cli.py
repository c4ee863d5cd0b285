"""Command-line interface for branchreview."""

from __future__ import annotations

import asyncio
import os
import sys

import click

from branchreview import __version__
from branchreview.assign import ReviewerAssignment
from branchreview.config import (
    INPUT_BRANCH,
    INPUT_REVIEWERS,
    INPUT_TEAM_REVIEWERS,
    INPUT_TOKEN,
    input_env_key,
)
from branchreview.ui.console import Console

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="branchreview")
def main():
    """branchreview - request pull request reviewers for a target branch."""
    pass


@main.command("run")
@click.option("--branch", "-b", default=None, help="Target branch pull requests must merge into.")
@click.option("--reviewers", "-r", default=None, help="Comma-separated reviewer logins.")
@click.option("--team-reviewers", "-t", default=None, help="Comma-separated team slugs.")
@click.option("--token", default=None, help="GitHub token used for the API call.")
def run(
    branch: str | None,
    reviewers: str | None,
    team_reviewers: str | None,
    token: str | None,
):
    """Request reviewers on the pull request that triggered the workflow.

    Inputs are read from the INPUT_* environment variables the Actions runner
    sets; options given on the command line take precedence.

    Usage in CI:

        branchreview run

    Local usage:

        GITHUB_EVENT_NAME=pull_request GITHUB_EVENT_PATH=event.json \\
        GITHUB_REPOSITORY=owner/repo branchreview run -b main -r octocat
    """
    env = dict(os.environ)
    overrides = {
        INPUT_BRANCH: branch,
        INPUT_REVIEWERS: reviewers,
        INPUT_TEAM_REVIEWERS: team_reviewers,
        INPUT_TOKEN: token,
    }
    for name, value in overrides.items():
        if value is not None:
            env[input_env_key(name)] = value

    result = asyncio.run(ReviewerAssignment(env=env, console=console).run())
    if result.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
