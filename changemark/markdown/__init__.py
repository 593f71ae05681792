"""Markdown renderer package for changemark.

Rendering runs in fixed stages, each a pure function:
- base: group_by, uniq, upper_first, format_name
- references: format_reference, format_references
- sections: format_commit, build_title, build_type_sections,
  build_breaking_changes, build_contributors

generate_markdown assembles the stages into the final document.
"""

import logging

from changemark.markdown.base import format_name, group_by, uniq, upper_first
from changemark.markdown.references import format_reference, format_references
from changemark.markdown.sections import (
    build_breaking_changes,
    build_contributors,
    build_title,
    build_type_sections,
    format_commit,
)
from changemark.models import ChangelogConfig, Commit
from changemark.shortcodes import normalize_shortcodes

logger = logging.getLogger(__name__)


def generate_markdown(commits: list[Commit], config: ChangelogConfig) -> str:
    """Render a markdown changelog.

    Layout:
        ## <version title>

        ### <type title>

          - <commit line>

        #### ⚠️  Breaking Changes

          - <commit line>

        ### ❤️  Contributors

        - <name>

    Args:
        commits: Parsed commits, oldest first.
        config: Section table, version range and optional GitHub repository.

    Returns:
        The trimmed markdown document with emoji shortcodes converted.
    """
    type_groups = group_by(commits, lambda commit: commit.type)

    markdown: list[str] = ["", build_title(config), ""]

    section_lines, breaking_changes = build_type_sections(type_groups, config)
    markdown.extend(section_lines)
    markdown.extend(build_breaking_changes(breaking_changes))
    markdown.extend(build_contributors(commits))

    logger.debug(
        f"Rendered {len(commits)} commit(s), {len(breaking_changes)} breaking change(s)"
    )
    return normalize_shortcodes("\n".join(markdown).strip(), strict=True)


__all__ = [
    # Main function
    "generate_markdown",
    # Stages
    "build_title",
    "build_type_sections",
    "build_breaking_changes",
    "build_contributors",
    "format_commit",
    "format_reference",
    "format_references",
    # Utilities
    "group_by",
    "uniq",
    "upper_first",
    "format_name",
]
