"""Executor Protocol - how one code block gets run.

An executor knows how to run the text of a code block for one language
tag.  ``Executor`` is a ``typing.Protocol``: any object with a ``name`` and
an async ``run`` method satisfies it, no base class required.

ARCHITECTURE
────────────
::

    Executor (Protocol)
      └── .run(code, ctx) ─ run the block, resolve to an exit status

    Implementations:
      BashExecutor     ─ whole block as one bash script   (tag: bash)
      ConsoleExecutor  ─ "$ "-prompted lines, one by one  (tag: console)

Related modules:
    registry.py   - language tag to executor lookup
    dispatcher.py - runs a task's blocks through the registry
"""

from typing import Protocol, runtime_checkable

from mkdo.core.models import Code
from mkdo.execution.context import RuntimeContext


@runtime_checkable
class Executor(Protocol):
    """Runs one code block.

    Example implementation:
        >>> class EchoExecutor:
        ...     name = "echo"
        ...
        ...     async def run(self, code: Code, ctx: RuntimeContext) -> int:
        ...         ctx.log(code.value)
        ...         return 0
    """

    name: str

    async def run(self, code: Code, ctx: RuntimeContext) -> int:
        """Run *code* in *ctx*.

        Args:
            code: The block to run.
            ctx: Working directory, trailing arguments, message callbacks.

        Returns:
            Exit status; 0 means success.  Process failures (cannot start,
            killed by a signal) are reported as non-zero statuses, never
            raised.
        """
        ...


__all__ = ["Executor"]
