"""Dispatcher - runs one task's code blocks in order.

Each block is routed by its language tag.  Blocks whose tag has no
executor (or no tag at all) are skipped without affecting the result.
The first non-zero status stops the task and becomes its result; side
effects of blocks that already ran are not rolled back.

Blocks never overlap: each executor call is awaited to completion before
the next block is looked at.
"""

from __future__ import annotations

from collections.abc import Mapping

from mkdo.core.logging import LogContext, get_logger
from mkdo.core.models import Task
from mkdo.execution.context import RuntimeContext
from mkdo.execution.executors import Executor

logger = get_logger(__name__)


async def run_task(task: Task, registry: Mapping[str, Executor], ctx: RuntimeContext) -> int:
    """Run *task* and return its exit status.

    Args:
        task: Task whose codes run in order.
        registry: Language tag → executor.
        ctx: Shared, read-only context for every block.

    Returns:
        0 if every block was skipped or succeeded, otherwise the status of
        the first failing block.
    """
    with LogContext(task=task.name):
        logger.debug("dispatcher.started", codes=len(task.codes))

        for index, code in enumerate(task.codes):
            executor = registry.get(code.language) if code.language is not None else None
            if executor is None:
                logger.debug("dispatcher.code_skipped", index=index, language=code.language)
                continue

            exit_code = await executor.run(code, ctx)
            if exit_code != 0:
                logger.info("dispatcher.code_failed", index=index, language=code.language, exit_code=exit_code)
                return exit_code

        logger.debug("dispatcher.completed")
        return 0


__all__ = ["run_task"]
