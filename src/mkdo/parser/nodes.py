"""Document nodes - the only view of the parsed tree the extractor sees.

Any tree parser can feed the extractor as long as it maps its top-level
nodes onto these three variants.  :mod:`mkdo.parser.markdown` does this for
markdown-it-py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """A heading such as ``## build``."""

    depth: int
    text: str


@dataclass(frozen=True)
class CodeBlock:
    """A fenced or indented code block."""

    language: str | None
    value: str


@dataclass(frozen=True)
class Other:
    """Any other top-level node, reduced to its plain text."""

    text: str


DocumentNode = Heading | CodeBlock | Other

__all__ = ["CodeBlock", "DocumentNode", "Heading", "Other"]
