"""
Built-in tasks - consulted only when the document defines no task by that name.

    help          usage, options, built-in tasks and examples
    tasks         document tasks sorted by name, with descriptions
    sync-scripts  mirror tasks into package.json "scripts"

Every built-in has the signature ``(task_map, ctx) -> int`` so the runner
can treat it like a task result.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mkdo.core.models import TaskMap, sorted_tasks
from mkdo.execution.context import RuntimeContext
from mkdo.ops.sync_scripts import sync_scripts

BuiltinTask = Callable[[TaskMap, RuntimeContext], int]

console = Console()

USAGE = """\
mkdo - Markdown task runner

$ mkdo [OPTIONS] TASK_NAME [ARGS]...

Options:
    -f FILE,    --file           FILE     Markdown file path containing tasks
    -d DEPTH,   --root-depth     DEPTH    heading depth to determine task root
    -p PATTERN, --root-pattern   PATTERN  heading contents glob to determine task root
    -s SEP,     --task-separator SEP      separator string for nested tasks
    -w DIR,     --cwd            DIR      working directory on task execution
    --help                                shows this help
    --version                             shows mkdo version

Default Tasks:

    help                                  shows this help
    tasks                                 shows tasks (but excludes default tasks)
    sync-scripts                          adds tasks to package.json's 'scripts' field

Examples:

    Run task 'build' defined in 'mkdo.md':

        $ mkdo build

    Run task 'format:check' defined in section '## tasks' of 'readme.md':

        $ mkdo -f readme.md -d 2 -p tasks format:check
"""


def print_help() -> None:
    console.print(USAGE, markup=False, highlight=False, emoji=False, soft_wrap=True, end="")


def show_help(task_map: TaskMap, ctx: RuntimeContext) -> int:
    print_help()
    return 0


def show_tasks(task_map: TaskMap, ctx: RuntimeContext) -> int:
    """Print every document task, sorted by name, with its description."""
    table = Table(
        title="Tasks:",
        title_justify="left",
        show_header=False,
        box=None,
        padding=(0, 0, 0, 4),
    )
    table.add_column("name", style="bold cyan", no_wrap=True)
    table.add_column("description")
    for task in sorted_tasks(task_map):
        table.add_row(Text(task.name), Text(task.description or ""))
    console.print(table)
    return 0


BUILTIN_TASKS: dict[str, BuiltinTask] = {
    "help": show_help,
    "tasks": show_tasks,
    "sync-scripts": sync_scripts,
}


__all__ = [
    "BUILTIN_TASKS",
    "USAGE",
    "BuiltinTask",
    "print_help",
    "show_help",
    "show_tasks",
]
