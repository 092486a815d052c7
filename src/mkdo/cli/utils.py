"""
CLI utility helpers - terminal output for user-facing messages.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)

PREFIX = "[mkdo]"

# Messages echo task commands verbatim
_PLAIN = {"markup": False, "highlight": False, "emoji": False, "soft_wrap": True}


def log_message(message: str) -> None:
    """Informational message on stdout (``[mkdo] ...``)."""
    console.print(f"{PREFIX} {message}", **_PLAIN)


def error_message(message: str) -> None:
    """Error message on stderr (``[mkdo] ...``)."""
    err_console.print(f"{PREFIX} {message}", style="red", **_PLAIN)


__all__ = ["console", "err_console", "error_message", "log_message"]
