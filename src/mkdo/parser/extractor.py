"""Task extraction - document nodes to a validated :data:`TaskMap`.

Headings define task names, code blocks under a heading are its commands.
The walk is a single pass over the top-level nodes with two pieces of
state: a heading-name stack (one entry per depth) and the task currently
being built.

ARCHITECTURE
────────────
::

    # Tasks            depth 1 = root_depth → root, matched against root_pattern
    ## build           depth 2 → task "build"
    ```bash
    make
    ```
    ### docs           depth 3 → task "build:docs"
    #### deep          depth 4 → task "build:docs:deep"

    # Tasks
    ### skipped        depth 3 directly under depth 1 → task ":skipped"

Skipped heading levels are padded with empty segments so a task's name
always has one segment per depth below the root.

Rules:
- every heading ends the task being built, siblings included;
- only a heading at exactly ``root_depth`` re-evaluates the root gate;
- headings at or above ``root_depth`` never become tasks;
- a task's description is the text of its first non-code node;
- tasks without code blocks are dropped; duplicate names are an error.

Example::

    nodes = parse_document(text)
    task_map = extract(nodes, ExtractOptions(root_depth=2, root_pattern="tasks"))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from fnmatch import fnmatchcase

from mkdo.core.errors import DuplicateTaskError
from mkdo.core.logging import get_logger
from mkdo.core.models import Code, ExtractOptions, Task, TaskMap
from mkdo.parser.nodes import CodeBlock, DocumentNode, Heading

logger = get_logger(__name__)


@dataclass
class _TaskBuilder:
    """Mutable task under construction; frozen into a :class:`Task` at the end."""

    name: str
    description: str | None = None
    codes: list[Code] = field(default_factory=list)

    def build(self) -> Task:
        return Task(name=self.name, description=self.description, codes=tuple(self.codes))


def extract(nodes: Iterable[DocumentNode], options: ExtractOptions | None = None) -> TaskMap:
    """Extract tasks from top-level document nodes.

    Args:
        nodes: Top-level nodes in document order.
        options: Root gating and naming options (defaults if omitted).

    Returns:
        Mapping from task name to task; every task has at least one code.

    Raises:
        DuplicateTaskError: If two tasks with code blocks share a name.
            No partial mapping is returned.
    """
    options = options or ExtractOptions()
    root_depth = options.root_depth

    finished: list[_TaskBuilder] = []
    building: _TaskBuilder | None = None
    name_stack: list[str] = []
    is_under_root = root_depth <= 0

    for node in nodes:
        if isinstance(node, Heading):
            if building is not None:
                finished.append(building)
                building = None

            while len(name_stack) >= node.depth:
                name_stack.pop()
            while len(name_stack) < node.depth - 1:
                name_stack.append("")
            name_stack.append(node.text)

            if len(name_stack) == root_depth:
                is_under_root = fnmatchcase(node.text, options.root_pattern)

            if is_under_root and len(name_stack) > root_depth:
                building = _TaskBuilder(name=options.task_separator.join(name_stack[root_depth:]))
            continue

        if building is None:
            continue

        if isinstance(node, CodeBlock):
            building.codes.append(Code(language=node.language, value=node.value))
        elif building.description is None:
            building.description = node.text

    if building is not None:
        finished.append(building)

    task_map: TaskMap = {}
    for builder in finished:
        if not builder.codes:
            logger.debug("extractor.task_dropped", task=builder.name, reason="no code blocks")
            continue
        if builder.name in task_map:
            raise DuplicateTaskError(builder.name)
        task_map[builder.name] = builder.build()

    logger.debug("extractor.completed", tasks=len(task_map))
    return task_map


__all__ = ["extract"]
