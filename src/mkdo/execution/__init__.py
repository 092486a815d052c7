"""
Execution: run a task's code blocks through language executors.

Example:
    >>> from mkdo.execution import RuntimeContext, get_default_registry, run_task
    >>> ctx = RuntimeContext.create(Path.cwd(), ["--verbose"])
    >>> exit_code = await run_task(task, get_default_registry(), ctx)
"""

from mkdo.execution.context import RuntimeContext
from mkdo.execution.dispatcher import run_task
from mkdo.execution.executors import BashExecutor, ConsoleExecutor, Executor
from mkdo.execution.process import SPAWN_FAILURE_EXIT_CODE
from mkdo.execution.registry import (
    ExecutorRegistry,
    create_default_registry,
    get_default_registry,
    register_executor,
    reset_default_registry,
)

__all__ = [
    "SPAWN_FAILURE_EXIT_CODE",
    "BashExecutor",
    "ConsoleExecutor",
    "Executor",
    "ExecutorRegistry",
    "RuntimeContext",
    "create_default_registry",
    "get_default_registry",
    "register_executor",
    "reset_default_registry",
    "run_task",
]
