"""Request and response models for the GitHub review request endpoint."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, field_validator


class ReviewRequest(BaseModel):
    """Payload of a "request reviewers" call.

    Empty reviewer lists are kept as ``None`` so they are left out of the
    request entirely; the API treats an absent key differently from ``[]``.
    """

    owner: str
    repo: str
    pull_number: int
    reviewers: list[str] | None = None
    team_reviewers: list[str] | None = None

    @field_validator("reviewers", "team_reviewers")
    @classmethod
    def _empty_as_none(cls, value: list[str] | None) -> list[str] | None:
        return value or None

    def payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def body(self) -> dict[str, Any]:
        """JSON body sent to the endpoint (path parameters excluded)."""
        return self.model_dump(exclude_none=True, exclude={"owner", "repo", "pull_number"})

    def to_json(self) -> str:
        return json.dumps(self.payload())


class RequestedReviewer(BaseModel):
    login: str


class RequestedTeam(BaseModel):
    slug: str


class ReviewRequestResult(BaseModel):
    """The reviewers and teams now requested on the pull request."""

    requested_reviewers: list[RequestedReviewer] = Field(default_factory=list)
    requested_teams: list[RequestedTeam] = Field(default_factory=list)

    @field_validator("requested_reviewers", "requested_teams", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def logins(self) -> list[str]:
        return [r.login for r in self.requested_reviewers]

    @property
    def slugs(self) -> list[str]:
        return [t.slug for t in self.requested_teams]
