"""
Structured error types for mkdo.

Every failure mkdo raises on purpose is a :class:`MkdoError`.  Each error
carries a :class:`ErrorCategory` so the CLI can log it as a structured event
and map it to an exit status without string matching.

Architecture:
    ::

        MkdoError (category, context)
          ├── DuplicateTaskError     PARSE      two tasks share a name
          ├── UnknownTaskError       TASK       requested task is missing
          ├── ExecutorNotFoundError  EXECUTION  no executor for a tag (KeyError)
          ├── DocumentNotFoundError  CONFIG     task document is missing
          └── ConfigError            CONFIG     bad config file or arguments

Process failures are *not* exceptions: executors report them as integer
exit statuses, and the dispatcher propagates those unchanged.

Usage:
    from mkdo.core.errors import DuplicateTaskError

    if name in task_map:
        raise DuplicateTaskError(name)
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and exit-code routing."""

    PARSE = "PARSE"           # Task document structure
    TASK = "TASK"             # Task lookup
    EXECUTION = "EXECUTION"   # Executor resolution
    CONFIG = "CONFIG"         # Config files, flags, document paths


class MkdoError(Exception):
    """
    Base exception for all mkdo errors.

    Subclasses set ``default_category``; ``context`` holds small key/value
    pairs that end up in the structured log record.
    """

    default_category: ErrorCategory = ErrorCategory.CONFIG

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or {}
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# TASK DOCUMENT ERRORS
# =============================================================================


class DuplicateTaskError(MkdoError):
    """Two headings produced the same fully-qualified task name."""

    default_category = ErrorCategory.PARSE

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicated task '{name}' is defined", context={"task": name})


class UnknownTaskError(MkdoError):
    """The requested task is neither defined in the document nor built in."""

    default_category = ErrorCategory.TASK

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown task '{name}'", context={"task": name})


# =============================================================================
# EXECUTION ERRORS
# =============================================================================


class ExecutorNotFoundError(MkdoError, KeyError):
    """
    No executor is registered for a code block's language tag.

    This is a ``KeyError`` so ``Mapping.get`` on a registry returns ``None``
    for unknown tags; the dispatcher relies on that to skip such blocks.
    """

    default_category = ErrorCategory.EXECUTION

    def __init__(self, language: str | None):
        self.language = language
        super().__init__(f"no executor for language {language!r}", context={"language": language})

    def __str__(self) -> str:
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(MkdoError):
    """
    Configuration error.

    Raised for unreadable config files, invalid option values, and bad
    arguments to built-in tasks.
    """

    default_category = ErrorCategory.CONFIG


class DocumentNotFoundError(ConfigError):
    """The task document does not exist."""

    def __init__(self, path: Path | str, cause: Exception | None = None):
        self.path = Path(path)
        super().__init__(
            f"task document '{self.path}' not found",
            context={"path": str(self.path)},
            cause=cause,
        )


__all__ = [
    "ErrorCategory",
    "MkdoError",
    "DuplicateTaskError",
    "UnknownTaskError",
    "ExecutorNotFoundError",
    "ConfigError",
    "DocumentNotFoundError",
]
