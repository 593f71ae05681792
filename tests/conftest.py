"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from changemark.models import ChangelogConfig, Commit


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_commit_dicts():
    """Sample parsed commits as dictionaries, oldest first."""
    return [
        {
            "type": "feat",
            "scope": "api",
            "description": "add endpoint",
            "isBreaking": True,
            "references": [{"type": "issue", "value": "#42"}],
            "authors": [{"name": "jane doe"}],
        },
        {
            "type": "fix",
            "scope": None,
            "description": "handle empty payload",
            "isBreaking": False,
            "references": [
                {"type": "hash", "value": "a1b2c3d"},
                {"type": "pull-request", "value": "#7"},
            ],
            "authors": [{"name": "bob"}],
        },
        {
            "type": "chore",
            "description": "bump deps",
            "references": [],
            "authors": [{"name": "zoe"}],
        },
    ]


@pytest.fixture
def sample_commits(sample_commit_dicts):
    """Sample parsed commits as Commit models."""
    return [Commit.model_validate(item) for item in sample_commit_dicts]


@pytest.fixture
def github_config():
    """Config with two sections and a GitHub repository."""
    return ChangelogConfig.model_validate(
        {
            "types": {
                "feat": {"title": "Features"},
                "fix": {"title": "Fixes"},
            },
            "from": "v1.0.0",
            "to": "v1.1.0",
            "github": "org/repo",
        }
    )


@pytest.fixture
def plain_config():
    """Config with two sections and no link target."""
    return ChangelogConfig.model_validate(
        {
            "types": {
                "feat": {"title": "Features"},
                "fix": {"title": "Fixes"},
            },
            "from": "v1.0.0",
            "to": "v1.1.0",
        }
    )
