"""Task model - what the extractor produces and the dispatcher runs.

A :class:`Task` is one runnable unit: the heading path that names it, an
optional description, and the fenced code blocks beneath it in document
order.  Both types are frozen; the extractor builds them once per pass and
nothing mutates them afterwards.

Example:
    >>> task = Task(name="build", codes=(Code(language="bash", value="make"),))
    >>> task_map = {task.name: task}
    >>> [t.name for t in sorted_tasks(task_map)]
    ['build']
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Code:
    """One fenced code block."""

    language: str | None
    """Declared tag (``bash``, ``console``, ...) or None when the fence has none"""

    value: str
    """Raw block text, unmodified"""


@dataclass(frozen=True)
class Task:
    """A named, ordered list of code blocks."""

    name: str
    """Heading path below the root, joined by the task separator"""

    description: str | None = None
    """Plain text of the first non-heading, non-code node under the heading"""

    codes: tuple[Code, ...] = field(default_factory=tuple)
    """Code blocks in document order; never empty once extracted"""


TaskMap = dict[str, Task]
"""Mapping from task name to task.  Every task in it has at least one code."""


@dataclass(frozen=True)
class ExtractOptions:
    """How headings map to task names.

    Example:
        >>> ExtractOptions(root_depth=2, root_pattern="tasks")
    """

    root_depth: int = 1
    """Heading depth of root sections; 0 or less disables root gating"""

    root_pattern: str = "*"
    """Glob matched against root heading text to select in-scope sections"""

    task_separator: str = ":"
    """Joins nested heading names into one task name"""


def sorted_tasks(task_map: Mapping[str, Task]) -> list[Task]:
    """Tasks ordered by name, for display."""
    return sorted(task_map.values(), key=lambda task: task.name)


__all__ = ["Code", "ExtractOptions", "Task", "TaskMap", "sorted_tasks"]
