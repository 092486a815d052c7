"""
mkdo CLI - Typer-based command-line interface.

Entry point: ``mkdo`` (registered in pyproject.toml ``[project.scripts]``)
"""

from mkdo.cli.app import app

__all__ = ["app"]
