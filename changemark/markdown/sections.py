"""Section builders for the markdown changelog.

Each builder returns a list of lines; the caller joins them with newlines.
Headings are surrounded by blank lines.
"""

import logging

from changemark.constants import (
    BREAKING_CHANGES_HEADING,
    BREAKING_MARKER,
    CONTRIBUTORS_HEADING,
    GITHUB_URL,
)
from changemark.markdown.base import format_name, uniq, upper_first
from changemark.markdown.references import format_references
from changemark.models import ChangelogConfig, Commit

logger = logging.getLogger(__name__)


def format_commit(commit: Commit, config: ChangelogConfig) -> str:
    """Format one commit as a list item.

    Format:
        "  - **<scope>:** ⚠️  <Description> (<references>)"

    The scope, breaking marker and references are omitted when absent.

    Args:
        commit: The commit to format.
        config: Changelog configuration.

    Returns:
        The formatted line.
    """
    scope = commit.get_scope()
    scope_prefix = f"**{scope}:** " if scope is not None else ""
    breaking_marker = BREAKING_MARKER if commit.is_breaking else ""

    return (
        "  - "
        + scope_prefix
        + breaking_marker
        + upper_first(commit.description)
        + format_references(commit.references, config)
    )


def build_title(config: ChangelogConfig) -> str:
    """Build the version title line.

    Returns:
        "## [<to>](<compare url>)" when a repository is configured,
        otherwise "## <to> (<from>..<to>)".
    """
    github = config.get_github()
    if github is not None:
        compare_link = f"{GITHUB_URL}/{github}/compare/{config.from_}...{config.to}"
        return f"## [{config.to}]({compare_link})"
    return f"## {config.to} ({config.from_}..{config.to})"


def build_type_sections(
    type_groups: dict[str, list[Commit]],
    config: ChangelogConfig,
) -> tuple[list[str], list[str]]:
    """Build one section per configured commit type.

    Sections follow the order of config.types. Types without commits get no
    heading. Commits are listed newest first, i.e. in reverse of the order
    they were given in.

    Args:
        type_groups: Commits grouped by type key.
        config: Changelog configuration.

    Returns:
        Tuple of (section lines, breaking change lines). The breaking change
        lines are copies of the commit lines of breaking commits, in the
        order they were emitted.
    """
    lines: list[str] = []
    breaking_changes: list[str] = []

    for type_key, type_config in config.types.items():
        group = type_groups.get(type_key)
        if group is None or len(group) == 0:
            logger.debug(f"No commits for type '{type_key}', skipping section")
            continue

        lines.extend(["", f"### {type_config.title}", ""])
        for commit in reversed(group):
            line = format_commit(commit, config)
            lines.append(line)
            if commit.is_breaking:
                breaking_changes.append(line)

    return lines, breaking_changes


def build_breaking_changes(breaking_changes: list[str]) -> list[str]:
    """Build the breaking changes section, or nothing if there are none."""
    if len(breaking_changes) == 0:
        return []
    return ["", BREAKING_CHANGES_HEADING, "", *breaking_changes]


def build_contributors(commits: list[Commit]) -> list[str]:
    """Build the contributors section.

    Authors of every commit are included, whether or not the commit's type
    has a section. Names are normalized, deduplicated and sorted.

    Args:
        commits: All commits being rendered.

    Returns:
        The section lines, or an empty list when there are no authors.
    """
    names = [format_name(author.name) for commit in commits for author in commit.authors]
    names = sorted(uniq(names))

    if len(names) == 0:
        return []

    logger.debug(f"Listing {len(names)} contributor(s)")
    return ["", CONTRIBUTORS_HEADING, "", *(f"- {name}" for name in names)]
