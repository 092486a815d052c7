"""
Run one mkdo invocation: settings in, exit status out.

This is everything the CLI does apart from argument parsing and terminal
output, so it can be driven from tests or other front ends::

    settings = get_settings(cwd, root_depth=2)
    exit_code = await run("build", ["--release"], settings, cwd=cwd)

Lookup order for a task name: tasks from the document first, then the
built-in tasks.  Document errors (missing file, duplicate task) surface
before anything runs.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from mkdo.core.config import MkdoSettings
from mkdo.core.errors import UnknownTaskError
from mkdo.core.logging import get_logger
from mkdo.execution.context import RuntimeContext
from mkdo.execution.dispatcher import run_task
from mkdo.execution.executors import Executor
from mkdo.execution.registry import get_default_registry
from mkdo.ops.builtins import BUILTIN_TASKS, print_help
from mkdo.parser.loader import load_tasks

logger = get_logger(__name__)


async def run(
    task_name: str | None,
    args: Sequence[str],
    settings: MkdoSettings,
    *,
    cwd: Path,
    log: Callable[[str], None] | None = None,
    error: Callable[[str], None] | None = None,
    registry: Mapping[str, Executor] | None = None,
) -> int:
    """Run *task_name* with trailing *args*.

    Returns:
        0 on success; 1 when no task name was given; otherwise the status
        of the task (or built-in task).

    Raises:
        UnknownTaskError: If *task_name* is neither a document task nor a
            built-in task.
        DocumentNotFoundError: If the task document does not exist.
        DuplicateTaskError: If the document defines a task name twice.
        ConfigError: On unreadable files or bad built-in task arguments.
    """
    ctx = RuntimeContext.create(cwd, args, log=log, error=error)

    if not task_name:
        ctx.error("no task")
        print_help()
        return 1

    task_map = load_tasks(settings.file, settings.extract_options())
    logger.debug("runner.tasks_loaded", file=str(settings.file), tasks=len(task_map))

    task = task_map.get(task_name)
    if task is None:
        builtin = BUILTIN_TASKS.get(task_name)
        if builtin is None:
            raise UnknownTaskError(task_name)
        logger.debug("runner.builtin", task=task_name)
        return builtin(task_map, ctx)

    return await run_task(task, registry if registry is not None else get_default_registry(), ctx)


__all__ = ["run"]
