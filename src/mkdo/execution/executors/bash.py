"""Bash executor - the whole block is one script.

The trailing arguments become the script's positional parameters::

    bash -c '<block>' -- arg1 arg2     # inside: $1=arg1, $2=arg2
"""

from __future__ import annotations

from mkdo.core.models import Code
from mkdo.execution.context import RuntimeContext
from mkdo.execution.process import run_exec


class BashExecutor:
    """Runs a ``bash`` block as a single script."""

    name = "bash"

    def __init__(self, shell: str = "bash") -> None:
        self._shell = shell

    async def run(self, code: Code, ctx: RuntimeContext) -> int:
        ctx.log("run bash script")
        return await run_exec([self._shell, "-c", code.value, "--", *ctx.args], ctx)


__all__ = ["BashExecutor"]
