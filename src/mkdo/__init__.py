"""
mkdo - a Markdown task runner.

Headings in a Markdown document name tasks; the fenced code blocks under
a heading are the task body, run in order by the executor registered for
the block's language tag::

    # Tasks

    ## build

    Compile the project.

    ```bash
    make all
    ```

``mkdo build`` then runs ``make all`` through bash.
"""

__version__ = "0.4.0"

from mkdo.core.errors import (
    ConfigError,
    DuplicateTaskError,
    ErrorCategory,
    MkdoError,
    UnknownTaskError,
)
from mkdo.core.models import Code, ExtractOptions, Task, TaskMap

__all__ = [
    "Code",
    "ConfigError",
    "DuplicateTaskError",
    "ErrorCategory",
    "ExtractOptions",
    "MkdoError",
    "Task",
    "TaskMap",
    "UnknownTaskError",
    "__version__",
]
