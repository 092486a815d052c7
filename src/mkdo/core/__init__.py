"""
Core primitives shared by the parser, the executors and the CLI:
task models, errors, logging and configuration.
"""

from mkdo.core.errors import (
    ConfigError,
    DocumentNotFoundError,
    DuplicateTaskError,
    ErrorCategory,
    ExecutorNotFoundError,
    MkdoError,
    UnknownTaskError,
)
from mkdo.core.models import Code, ExtractOptions, Task, TaskMap, sorted_tasks

__all__ = [
    "Code",
    "ConfigError",
    "DocumentNotFoundError",
    "DuplicateTaskError",
    "ErrorCategory",
    "ExecutorNotFoundError",
    "ExtractOptions",
    "MkdoError",
    "Task",
    "TaskMap",
    "UnknownTaskError",
    "sorted_tasks",
]
