"""Child-process spawning for executors.

Both helpers inherit stdin/stdout/stderr so the child owns the terminal,
run in ``ctx.cwd``, and await completion without blocking the event loop.
They never raise for process failures; the outcome is always an int:

- the child's own exit status when it exits normally;
- ``128 + N`` when it is killed by signal ``N`` (shell convention);
- :data:`SPAWN_FAILURE_EXIT_CODE` when it cannot be started at all.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from mkdo.core.logging import get_logger
from mkdo.execution.context import RuntimeContext

logger = get_logger(__name__)

SPAWN_FAILURE_EXIT_CODE = 127


async def run_exec(argv: Sequence[str], ctx: RuntimeContext) -> int:
    """Run ``argv[0]`` with the remaining items as its arguments."""
    try:
        process = await asyncio.create_subprocess_exec(*argv, cwd=ctx.cwd)
    except OSError as e:
        return _spawn_failed(argv[0], e, ctx)
    return await _wait(process, argv[0])


async def run_shell(command: str, ctx: RuntimeContext) -> int:
    """Run *command* through the system shell (``/bin/sh -c``)."""
    try:
        process = await asyncio.create_subprocess_shell(command, cwd=ctx.cwd)
    except OSError as e:
        return _spawn_failed(command, e, ctx)
    return await _wait(process, command)


async def _wait(process: asyncio.subprocess.Process, label: str) -> int:
    returncode = await process.wait()
    if returncode < 0:
        logger.info("process.killed", command=label, signal=-returncode)
        return 128 - returncode
    logger.debug("process.exited", command=label, exit_code=returncode)
    return returncode


def _spawn_failed(label: str, error: OSError, ctx: RuntimeContext) -> int:
    logger.info("process.spawn_failed", command=label, cwd=str(ctx.cwd), error=str(error))
    ctx.error(f"cannot start '{label}': {error.strerror or error}")
    return SPAWN_FAILURE_EXIT_CODE


__all__ = ["SPAWN_FAILURE_EXIT_CODE", "run_exec", "run_shell"]
