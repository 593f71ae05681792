"""Data models for changemark.

Contains:
- Reference: A pull request, issue or hash attached to a commit
- Author: A commit author
- Commit: A parsed commit record, the renderer's input
- TypeConfig: Display settings for one commit type
- ChangelogConfig: Section table, version range and link target

All models are frozen: they are read-only values for the duration of a render.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from changemark.constants import ReferenceType


class Reference(BaseModel):
    """A reference attached to a commit.

    Attributes:
        type: One of pull-request, issue or hash.
        value: The identifier, e.g. "#42" or "a1b2c3d".
    """

    model_config = ConfigDict(frozen=True)

    type: ReferenceType
    value: str


class Author(BaseModel):
    """A commit author.

    Attributes:
        name: Free-text display name, possibly empty or padded.
        email: Author email, unused by the renderer.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def ensure_name_str(cls, v):
        """Treat a missing name as empty."""
        if v is None:
            return ""
        return v


class Commit(BaseModel):
    """A parsed commit record.

    Accepts the wire name ``isBreaking`` as well as ``is_breaking``.

    Attributes:
        type: Commit type key (feat, fix, ...), looked up in ChangelogConfig.types.
        scope: Optional scope of the change.
        description: The commit description.
        is_breaking: Whether the commit introduces a breaking change.
        references: References in the order they were parsed.
        authors: Authors in the order they were parsed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Optional[str] = None
    scope: Optional[str] = None
    description: str = ""
    is_breaking: bool = Field(default=False, alias="isBreaking")
    references: list[Reference] = []
    authors: list[Author] = []

    @field_validator("description", mode="before")
    @classmethod
    def ensure_description_str(cls, v):
        """Treat a missing description as empty."""
        if v is None:
            return ""
        return v

    @field_validator("references", "authors", mode="before")
    @classmethod
    def ensure_list(cls, v):
        """Ensure references and authors are lists."""
        if v is None:
            return []
        return v

    def get_scope(self) -> Optional[str]:
        """Get the trimmed scope if one is set.

        Returns:
            The scope or None when missing or blank.
        """
        if self.scope is not None and self.scope.strip() != "":
            return self.scope.strip()
        return None


class TypeConfig(BaseModel):
    """Display settings for one commit type."""

    model_config = ConfigDict(frozen=True)

    title: str


class ChangelogConfig(BaseModel):
    """Configuration for a changelog render.

    Attributes:
        types: Ordered mapping of type key to its settings. Defines which
            commit types get a section and in what order.
        from_: Version the range starts at (``from`` on the wire).
        to: Version the range ends at.
        github: Optional "owner/repo"; enables hyperlinks when set.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    types: dict[str, TypeConfig] = Field(default_factory=dict)
    from_: str = Field(default="", alias="from")
    to: str = ""
    github: Optional[str] = None

    def get_github(self) -> Optional[str]:
        """Get the "owner/repo" link target if one is set.

        Returns:
            The trimmed repository slug or None when missing or blank.
        """
        if self.github is not None and self.github.strip() != "":
            return self.github.strip()
        return None
