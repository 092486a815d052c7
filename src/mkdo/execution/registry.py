"""Executor Registry - injectable language tag → executor lookup.

The dispatcher needs to resolve ``"bash"`` to an executor.  The registry
decouples registration (at startup, or from a plugin) from resolution (at
dispatch time), and supports both a global default and injectable
instances for testing.

ARCHITECTURE
────────────
::

    ExecutorRegistry  (a read-only Mapping[str, Executor] plus mutators)
      ├── .register(language, executor)  ─ add or replace a tag
      ├── .unregister(language)          ─ remove a tag
      ├── registry[language]             ─ lookup, ExecutorNotFoundError if missing
      ├── registry.get(language)         ─ lookup, None if missing
      └── .languages()                   ─ sorted registered tags

    create_default_registry()  ─ fresh registry with bash + console
    get_default_registry()     ─ module-level singleton
    reset_default_registry()   ─ drop the singleton (for testing)

BEST PRACTICES
──────────────
- Add tags with ``register``; the dispatcher never changes for new tags.
- Pass an explicit ``ExecutorRegistry`` in tests.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from mkdo.core.errors import ExecutorNotFoundError
from mkdo.core.logging import get_logger
from mkdo.execution.executors import BashExecutor, ConsoleExecutor, Executor

logger = get_logger(__name__)


class ExecutorRegistry(Mapping[str, Executor]):
    """Injectable executor registry.

    Example:
        >>> registry = ExecutorRegistry()
        >>> registry.register("bash", BashExecutor())
        >>> registry.get("bash")
        <...BashExecutor object at ...>
        >>> registry.get("python") is None
        True
    """

    def __init__(self, executors: Mapping[str, Executor] | None = None):
        self._executors: dict[str, Executor] = dict(executors or {})

    def register(self, language: str, executor: Executor) -> None:
        """Register *executor* for *language*, replacing any previous one."""
        if language in self._executors:
            logger.debug("registry.replaced", language=language)
        self._executors[language] = executor

    def unregister(self, language: str) -> bool:
        """Remove *language*.  Returns False if it was not registered."""
        return self._executors.pop(language, None) is not None

    def languages(self) -> list[str]:
        """Registered language tags, sorted."""
        return sorted(self._executors)

    # ── Mapping protocol ─────────────────────────────────────────

    def __getitem__(self, language: str) -> Executor:
        try:
            return self._executors[language]
        except KeyError:
            raise ExecutorNotFoundError(language) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._executors)

    def __len__(self) -> int:
        return len(self._executors)

    def __repr__(self) -> str:
        return f"ExecutorRegistry({self.languages()!r})"


def create_default_registry() -> ExecutorRegistry:
    """A fresh registry with the built-in ``bash`` and ``console`` executors."""
    return ExecutorRegistry({"bash": BashExecutor(), "console": ConsoleExecutor()})


# === GLOBAL DEFAULT REGISTRY ===

_default_registry: ExecutorRegistry | None = None


def get_default_registry() -> ExecutorRegistry:
    """Get the global default registry.

    Creates it lazily on first access.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def reset_default_registry() -> None:
    """Reset the global registry (for testing)."""
    global _default_registry
    _default_registry = None


def register_executor(language: str, executor: Executor, registry: ExecutorRegistry | None = None) -> None:
    """Register *executor* for *language* in *registry* (global default if None)."""
    target = registry if registry is not None else get_default_registry()
    target.register(language, executor)


__all__ = [
    "ExecutorRegistry",
    "create_default_registry",
    "get_default_registry",
    "register_executor",
    "reset_default_registry",
]
