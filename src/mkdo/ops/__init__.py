"""
Operations layer - what an mkdo invocation does, without any terminal
transport.  The CLI parses flags and renders messages; everything else
lives here.

Usage::

    from mkdo.ops import run

    exit_code = await run("build", [], settings, cwd=Path.cwd())
"""

from mkdo.ops.builtins import BUILTIN_TASKS, USAGE, BuiltinTask
from mkdo.ops.runner import run
from mkdo.ops.sync_scripts import sync_scripts

__all__ = [
    "BUILTIN_TASKS",
    "USAGE",
    "BuiltinTask",
    "run",
    "sync_scripts",
]
