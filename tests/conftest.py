"""
Shared pytest fixtures and configuration for mkdo tests.

This module provides:
- Registry and logging isolation fixtures
- Helpers for writing task documents and config files into tmp_path
- Recording callbacks for the runtime context

Usage:
    Fixtures are auto-discovered by pytest; request them as arguments.

    def test_something(write_doc, tmp_path):
        path = write_doc("# Tasks\\n## hi\\n```bash\\necho hi\\n```\\n")
"""

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from textwrap import dedent

import pytest

# Ensure mkdo package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mkdo.core.logging import configure_logging
from mkdo.execution.context import RuntimeContext
from mkdo.execution.registry import reset_default_registry


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_executor_registry() -> Generator[None, None, None]:
    """Drop the global executor registry before and after each test."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep structlog diagnostics off stdout; only warnings and up, on stderr."""
    configure_logging(level="WARNING", json_format=True, add_timestamp=False)


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every MKDO_* variable so settings tests see a clean environment."""
    for key in list(os.environ):
        if key.startswith("MKDO_"):
            monkeypatch.delenv(key)
    return monkeypatch


# =============================================================================
# Document Helpers
# =============================================================================


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[..., Path]:
    """Write a (dedented) Markdown document into tmp_path and return its path."""

    def _write(text: str, name: str = "mkdo.md") -> Path:
        path = tmp_path / name
        path.write_text(dedent(text), encoding="utf-8")
        return path

    return _write


class Recorder:
    """Collects messages sent through the context callbacks."""

    def __init__(self) -> None:
        self.logs: list[str] = []
        self.errors: list[str] = []

    def context(self, cwd: Path, args: tuple[str, ...] = ()) -> RuntimeContext:
        return RuntimeContext.create(cwd, args, log=self.logs.append, error=self.errors.append)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
