"""Action input handling for branchreview."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from branchreview.exceptions import ConfigError

INPUT_BRANCH = "branch"
INPUT_REVIEWERS = "reviewers"
INPUT_TEAM_REVIEWERS = "team-reviewers"
INPUT_TOKEN = "token"


def input_env_key(name: str) -> str:
    """Environment variable the Actions runner uses for an input (hyphens kept)."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """Read an action input, trimmed. Missing inputs read as an empty string."""
    env = os.environ if env is None else env
    key = input_env_key(name)
    for candidate in (key, key.replace("-", "_")):
        value = env.get(candidate)
        if value is not None:
            return value.strip()
    return ""


def parse_input_list(value: str | None) -> list[str]:
    """Split a comma-separated input into trimmed, non-empty entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class ActionInputs(BaseModel):
    """The inputs of one reviewer assignment run."""

    branch: str = ""
    reviewers: list[str] = Field(default_factory=list)
    team_reviewers: list[str] = Field(default_factory=list)
    token: str = Field(default="", repr=False)

    @field_validator("reviewers", "team_reviewers", mode="before")
    @classmethod
    def _split_list(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return parse_input_list(value)
        return value


def load_inputs(env: Mapping[str, str] | None = None) -> ActionInputs:
    """Read and validate the action inputs.

    Raises:
        ConfigError: If the branch is missing or no reviewers are given.
    """
    inputs = ActionInputs(
        branch=get_input(INPUT_BRANCH, env),
        reviewers=get_input(INPUT_REVIEWERS, env),
        team_reviewers=get_input(INPUT_TEAM_REVIEWERS, env),
        token=get_input(INPUT_TOKEN, env),
    )

    if not inputs.branch:
        raise ConfigError("Branch input is required")
    if not inputs.reviewers and not inputs.team_reviewers:
        raise ConfigError("At least one of reviewers or team-reviewers must be provided")

    return inputs
