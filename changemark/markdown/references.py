"""Reference formatting for commit lines.

Pull requests and issues are listed together, pull requests first. Without
either, only the first reference (usually a hash) is shown.
"""

from changemark.constants import GITHUB_URL, REFERENCE_PATH_SEGMENTS, ReferenceType
from changemark.models import ChangelogConfig, Reference


def format_reference(ref: Reference, config: ChangelogConfig) -> str:
    """Format a single reference.

    Args:
        ref: The reference to format.
        config: Changelog configuration; its github slug enables links.

    Returns:
        The raw value, or a markdown link to the GitHub page when a
        repository is configured.
    """
    github = config.get_github()
    if github is None:
        return ref.value

    segment = REFERENCE_PATH_SEGMENTS[ref.type]
    ref_id = ref.value[1:] if ref.value.startswith("#") else ref.value
    return f"[{ref.value}]({GITHUB_URL}/{github}/{segment}/{ref_id})"


def format_references(references: list[Reference], config: ChangelogConfig) -> str:
    """Format the reference suffix of a commit line.

    Args:
        references: The commit's references, in parsed order.
        config: Changelog configuration.

    Returns:
        " (...)" with the formatted references, or "" when there are none.
    """
    pull_requests = [ref for ref in references if ref.type == ReferenceType.PULL_REQUEST]
    issues = [ref for ref in references if ref.type == ReferenceType.ISSUE]

    if len(pull_requests) > 0 or len(issues) > 0:
        formatted = [format_reference(ref, config) for ref in pull_requests + issues]
        return " (" + ", ".join(formatted) + ")"

    if len(references) > 0:
        return " (" + format_reference(references[0], config) + ")"

    return ""
