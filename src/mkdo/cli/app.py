"""
Root Typer application for the mkdo CLI.

``mkdo [OPTIONS] TASK_NAME [ARGS]...``

Options are only recognised before the task name; everything after it is
forwarded to the task untouched, including things that look like options.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from mkdo import __version__
from mkdo.cli.utils import error_message, log_message
from mkdo.core.config import get_settings
from mkdo.core.errors import MkdoError
from mkdo.core.logging import configure_logging, get_logger
from mkdo.ops.runner import run

logger = get_logger(__name__)

app = typer.Typer(
    name="mkdo",
    help="mkdo: run tasks defined in Markdown.",
    add_completion=False,
    rich_markup_mode="rich",
)

EPILOG = """\
Default tasks: [bold]help[/bold] (shows usage), [bold]tasks[/bold] (lists tasks),
[bold]sync-scripts[/bold] (adds tasks to package.json 'scripts').

Example: [cyan]mkdo -f readme.md -d 2 -p tasks format:check[/cyan]
"""


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("mkdo")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"mkdo {v}")
        raise typer.Exit()


# ── Command ──────────────────────────────────────────────────────────────


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
    epilog=EPILOG,
)
def main(
    task_name: str | None = typer.Argument(None, metavar="TASK_NAME", help="Task to run."),
    args: list[str] | None = typer.Argument(None, metavar="[ARGS]...", help="Arguments forwarded to the task."),
    file: Path | None = typer.Option(None, "--file", "-f", help="Markdown file path containing tasks."),
    root_depth: int | None = typer.Option(None, "--root-depth", "-d", help="Heading depth to determine task root."),
    root_pattern: str | None = typer.Option(
        None, "--root-pattern", "-p", help="Heading contents glob to determine task root."
    ),
    task_separator: str | None = typer.Option(
        None, "--task-separator", "-s", help="Separator string for nested tasks."
    ),
    cwd: Path | None = typer.Option(None, "--cwd", "-w", help="Working directory on task execution."),
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Run TASK_NAME from a Markdown task document."""
    workdir = (cwd or Path.cwd()).resolve()

    try:
        settings = get_settings(
            workdir,
            file=file,
            root_depth=root_depth,
            root_pattern=root_pattern,
            task_separator=task_separator,
        )
    except MkdoError as e:
        error_message(e.message)
        raise typer.Exit(code=1) from e

    json_format = None if settings.log_format is None else settings.log_format == "json"
    configure_logging(level=settings.log_level, json_format=json_format)
    logger.debug(
        "cli.settings",
        file=str(settings.file),
        config=str(settings.config_path) if settings.config_path else None,
        cwd=str(workdir),
    )

    try:
        exit_code = asyncio.run(
            run(
                task_name,
                args or [],
                settings,
                cwd=workdir,
                log=log_message,
                error=error_message,
            )
        )
    except MkdoError as e:
        logger.debug("cli.failed", **e.to_dict())
        error_message(e.message)
        raise typer.Exit(code=1) from e

    raise typer.Exit(code=exit_code)


__all__ = ["app", "main"]
