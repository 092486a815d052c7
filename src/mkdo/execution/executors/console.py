"""Console executor - runs the prompted lines of a terminal transcript.

A ``console`` block reads like a shell session::

    $ npm run build
    $ npm test
    > output and commentary from here on is never executed

Only the leading run of ``$ ``-prefixed lines is executed, one shell
invocation per line, with the prefix stripped and the trailing arguments
appended.  The first line without the prefix ends the scan.  Before
splitting, the first backslash-newline continuation is joined.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from mkdo.core.models import Code
from mkdo.execution.context import RuntimeContext
from mkdo.execution.process import run_shell

PROMPT = "$ "


def prompted_commands(value: str) -> list[str]:
    """Commands a console block would run, in order.

    Example:
        >>> prompted_commands("$ echo a\\n$ echo b\\necho c")
        ['echo a', 'echo b']
    """
    commands: list[str] = []
    for line in value.replace("\\\n", "", 1).split("\n"):
        if not line.startswith(PROMPT):
            break
        commands.append(line[len(PROMPT):])
    return commands


def with_arguments(command: str, args: Sequence[str]) -> str:
    """Append shell-quoted *args* to *command*."""
    if not args:
        return command
    return f"{command} {shlex.join(args)}"


class ConsoleExecutor:
    """Runs the ``$ ``-prompted lines of a ``console`` block."""

    name = "console"

    async def run(self, code: Code, ctx: RuntimeContext) -> int:
        for command in prompted_commands(code.value):
            ctx.log(f"{PROMPT}{command}")
            exit_code = await run_shell(with_arguments(command, ctx.args), ctx)
            if exit_code != 0:
                return exit_code
        return 0


__all__ = ["PROMPT", "ConsoleExecutor", "prompted_commands", "with_arguments"]
