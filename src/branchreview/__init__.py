"""branchreview - request pull request reviewers for a configured target branch."""

__version__ = "0.1.0"
