"""CLI entry point for changemark."""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml

from changemark import __version__
from changemark.commits import load_commits
from changemark.config import changelog_config_to_dict, load_changelog_config
from changemark.exceptions import ChangelogError
from changemark.markdown import generate_markdown
from changemark.models import ChangelogConfig

DEFAULT_CONFIG_FILE = Path(".changemark.yaml")

app = typer.Typer(
    name="changemark",
    help="changemark: render a markdown changelog from parsed commits",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"changemark {__version__}")
        raise typer.Exit()


def _load_config_or_exit(config_file: Optional[Path]) -> ChangelogConfig:
    """Load the changelog config, exiting with an error message on failure."""
    try:
        return load_changelog_config(config_file or DEFAULT_CONFIG_FILE)
    except ChangelogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.callback()
def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log rendering details to stderr",
    ),
) -> None:
    """Render markdown changelogs from parsed commit records."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command("render")
def render_command(
    commits_file: Path = typer.Argument(
        ...,
        help="JSON or YAML file with parsed commits, oldest first",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Changelog config file (default: .changemark.yaml)",
    ),
    from_ref: Optional[str] = typer.Option(
        None,
        "--from",
        help="Version the changelog range starts at",
    ),
    to_ref: Optional[str] = typer.Option(
        None,
        "--to",
        help="Version the changelog range ends at",
    ),
    github: Optional[str] = typer.Option(
        None,
        "--github",
        help="GitHub repository (owner/repo) to link references to",
    ),
    no_github: bool = typer.Option(
        False,
        "--no-github",
        help="Disable links even if a repository is configured",
    ),
) -> None:
    """Render the changelog for a set of commits and print it."""
    config = _load_config_or_exit(config_file)

    try:
        commits = load_commits(commits_file)
    except ChangelogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    overrides = {}
    if from_ref is not None:
        overrides["from_"] = from_ref
    if to_ref is not None:
        overrides["to"] = to_ref
    if no_github:
        overrides["github"] = None
    elif github is not None:
        overrides["github"] = github
    if overrides:
        config = config.model_copy(update=overrides)

    typer.echo(generate_markdown(commits, config))


@app.command("types")
def types_command(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Changelog config file (default: .changemark.yaml)",
    ),
) -> None:
    """List the commit types that get a section, in display order."""
    config = _load_config_or_exit(config_file)

    if len(config.types) == 0:
        typer.echo("No commit types configured.")
        return

    typer.echo("Changelog sections:")
    for type_key, type_config in config.types.items():
        typer.echo(f"  • {type_key}: {type_config.title}")


@app.command("config")
def config_command(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Changelog config file (default: .changemark.yaml)",
    ),
) -> None:
    """Show the effective changelog configuration as YAML."""
    config = _load_config_or_exit(config_file)
    typer.echo(
        yaml.dump(
            changelog_config_to_dict(config),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ).rstrip()
    )
