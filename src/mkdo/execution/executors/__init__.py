"""Executors - one per code-block language tag.

Available executors:
- BashExecutor: whole block as one bash script (``bash``)
- ConsoleExecutor: ``$ ``-prompted transcript lines (``console``)

Example:
    >>> from mkdo.execution.executors import BashExecutor, Executor
    >>> executor: Executor = BashExecutor()
    >>> exit_code = await executor.run(code, ctx)
"""

from .bash import BashExecutor
from .console import ConsoleExecutor
from .protocol import Executor

__all__ = [
    "Executor",
    "BashExecutor",
    "ConsoleExecutor",
]
