"""
Runtime context passed to every executor call.

The context is the only channel through which process-wide state reaches
an executor: the working directory, the trailing CLI arguments, and the
two user-facing message callbacks.  It is frozen and shared by every code
block of one task.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path


def _discard(message: str) -> None:
    return None


@dataclass(frozen=True)
class RuntimeContext:
    """Context for one task run.

    Attributes:
        cwd: Working directory for spawned processes.
        args: Trailing arguments forwarded to every executor.
        log: Informational message callback (fire-and-forget).
        error: Error message callback (fire-and-forget).
    """

    cwd: Path
    args: tuple[str, ...] = ()
    log: Callable[[str], None] = field(default=_discard, repr=False)
    error: Callable[[str], None] = field(default=_discard, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cwd", Path(self.cwd))
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def create(
        cls,
        cwd: Path | str,
        args: Sequence[str] = (),
        *,
        log: Callable[[str], None] | None = None,
        error: Callable[[str], None] | None = None,
    ) -> RuntimeContext:
        """Build a context, leaving missing callbacks as no-ops."""
        return cls(
            cwd=Path(cwd),
            args=tuple(args),
            log=log or _discard,
            error=error or _discard,
        )


__all__ = ["RuntimeContext"]
