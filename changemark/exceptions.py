"""Changelog exception classes.

Contains all exception classes raised at the loading boundary:
- ChangelogError: Base exception for changemark errors
- ConfigError: Raised when the changelog configuration cannot be loaded
- CommitDataError: Raised when a commit input file cannot be loaded

The renderer itself raises none of these; it is total over validated models.
"""


class ChangelogError(Exception):
    """Base exception for changemark errors."""

    pass


class ConfigError(ChangelogError):
    """Raised when the changelog configuration is unreadable or invalid."""

    pass


class CommitDataError(ChangelogError):
    """Raised when commit records cannot be read or validated."""

    pass
