"""Markdown changelog renderer for parsed commit records."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("changemark")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
