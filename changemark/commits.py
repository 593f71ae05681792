"""Loading of parsed commit records.

Commits are read from a JSON or YAML file holding either a list of commit
objects or a mapping with a "commits" list:

    [
      {
        "type": "feat",
        "scope": "api",
        "description": "add endpoint",
        "isBreaking": false,
        "references": [{"type": "pull-request", "value": "#12"}],
        "authors": [{"name": "jane doe"}]
      }
    ]
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from changemark.exceptions import CommitDataError
from changemark.models import Commit

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def _parse_file(commits_file: Path):
    suffix = commits_file.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise CommitDataError(
            f"Unsupported commits file type '{suffix}': expected .json, .yaml or .yml"
        )

    try:
        text = commits_file.read_text(encoding="utf-8")
    except OSError as e:
        raise CommitDataError(f"Failed to read commits from {commits_file}: {e}")

    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CommitDataError(f"Failed to parse commits from {commits_file}: {e}")


def parse_commits(data) -> list[Commit]:
    """Validate raw commit data into Commit models.

    Args:
        data: A list of commit dicts, a mapping with a "commits" list, or None.

    Returns:
        List of Commit objects in input order.

    Raises:
        CommitDataError: If the data has the wrong shape or a commit is invalid.
    """
    if data is None:
        return []

    if isinstance(data, dict):
        if "commits" not in data:
            raise CommitDataError("Expected a list of commits or a mapping with a 'commits' key")
        data = data["commits"] or []

    if not isinstance(data, list):
        raise CommitDataError("Expected a list of commits")

    commits = []
    for index, item in enumerate(data):
        try:
            commits.append(Commit.model_validate(item))
        except ValidationError as e:
            raise CommitDataError(f"Invalid commit at index {index}: {e}")
    return commits


def load_commits(commits_file: Path) -> list[Commit]:
    """Load parsed commits from a JSON or YAML file.

    Args:
        commits_file: Path to the commits file.

    Returns:
        List of Commit objects in file order.

    Raises:
        CommitDataError: If the file cannot be read, parsed or validated.
    """
    commits = parse_commits(_parse_file(commits_file))
    logger.info(f"Loaded {len(commits)} commit(s) from {commits_file}")
    return commits
