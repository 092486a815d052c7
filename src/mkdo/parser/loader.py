"""Load a task document from disk and extract its tasks."""

from __future__ import annotations

from pathlib import Path

from mkdo.core.errors import ConfigError, DocumentNotFoundError
from mkdo.core.logging import get_logger
from mkdo.core.models import ExtractOptions, TaskMap
from mkdo.parser.extractor import extract
from mkdo.parser.markdown import parse_document

logger = get_logger(__name__)


def load_tasks(path: Path | str, options: ExtractOptions | None = None) -> TaskMap:
    """Read the Markdown file at *path* and extract its tasks.

    Raises:
        DocumentNotFoundError: If *path* does not exist.
        ConfigError: If *path* cannot be read.
        DuplicateTaskError: If two tasks share a name.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentNotFoundError(path, cause=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read task document '{path}': {e}", context={"path": str(path)}, cause=e) from e

    logger.debug("loader.document_read", path=str(path), size=len(text))
    return extract(parse_document(text), options)


__all__ = ["load_tasks"]
