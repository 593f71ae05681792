"""Constants for changemark.

Contains:
- ReferenceType: The closed set of commit reference kinds
- REFERENCE_PATH_SEGMENTS: GitHub URL path segment per reference kind
- DEFAULT_TYPES: Default section order and titles, keyed by commit type
- Glyphs and headings used by the markdown renderer
"""

from enum import Enum


class ReferenceType(str, Enum):
    """Kinds of references a commit can carry."""

    PULL_REQUEST = "pull-request"
    ISSUE = "issue"
    HASH = "hash"


GITHUB_URL = "https://github.com"

# "ssue" is the segment existing generated links point at; keep it stable
REFERENCE_PATH_SEGMENTS = {
    ReferenceType.PULL_REQUEST: "pull",
    ReferenceType.HASH: "commit",
    ReferenceType.ISSUE: "ssue",
}

BREAKING_MARKER = "⚠️  "
BREAKING_CHANGES_HEADING = "#### ⚠️  Breaking Changes"
CONTRIBUTORS_HEADING = "### ❤️  Contributors"

# Section order follows dict order
DEFAULT_TYPES = {
    "feat": "🚀 Enhancements",
    "perf": "🔥 Performance",
    "fix": "🩹 Fixes",
    "refactor": "💅 Refactors",
    "docs": "📖 Documentation",
    "build": "📦 Build",
    "types": "🌊 Types",
    "chore": "🏡 Chore",
    "examples": "🏀 Examples",
    "test": "✅ Tests",
    "style": "🎨 Styles",
    "ci": "🤖 CI",
}
