"""Custom exceptions for branchreview."""

from __future__ import annotations


class BranchReviewError(Exception):
    """Base exception for all branchreview errors."""


class ConfigError(BranchReviewError):
    """Action input errors."""


class ContextError(BranchReviewError):
    """Event context errors."""


class APIError(BranchReviewError):
    """GitHub API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
