"""Markdown to document nodes, via markdown-it-py.

The token stream is folded into a :class:`~markdown_it.tree.SyntaxTreeNode`
and only the root's direct children are converted; nested structure (list
items, block quotes) collapses into the plain text of its top-level node.

Plain text follows the usual "to string" reduction: literal text, inline
code and raw HTML contribute their content (block-level leaves without
their final newline), soft line breaks become ``\\n``, everything else
contributes the text of its children.
"""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mkdo.parser.nodes import CodeBlock, DocumentNode, Heading, Other

_TEXT_LEAVES = frozenset({"text", "code_inline", "html_inline"})
_BLOCK_LEAVES = frozenset({"html_block", "fence", "code_block"})


def create_parser() -> MarkdownIt:
    """CommonMark plus GFM tables."""
    return MarkdownIt("commonmark").enable("table")


def parse_document(text: str, md: MarkdownIt | None = None) -> list[DocumentNode]:
    """Parse Markdown *text* into top-level document nodes, in order."""
    md = md or create_parser()
    root = SyntaxTreeNode(md.parse(text))
    return [to_document_node(child) for child in root.children]


def to_document_node(node: SyntaxTreeNode) -> DocumentNode:
    if node.type == "heading":
        return Heading(depth=int(node.tag[1:]), text=to_plain_text(node))
    if node.type == "fence":
        return CodeBlock(language=fence_language(node.info), value=_strip_final_newline(node.content))
    if node.type == "code_block":
        return CodeBlock(language=None, value=_strip_final_newline(node.content))
    return Other(text=to_plain_text(node))


def to_plain_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text content beneath *node*."""
    if node.type in _TEXT_LEAVES:
        return node.content
    if node.type in _BLOCK_LEAVES:
        return _strip_final_newline(node.content)
    if node.type == "softbreak":
        return "\n"
    return "".join(to_plain_text(child) for child in node.children)


def fence_language(info: str) -> str | None:
    """First word of a fence info string (```` ```bash title ```` → ``bash``)."""
    words = info.split()
    return words[0] if words else None


def _strip_final_newline(content: str) -> str:
    # markdown-it keeps the newline before the closing fence
    return content[:-1] if content.endswith("\n") else content


__all__ = [
    "create_parser",
    "fence_language",
    "parse_document",
    "to_document_node",
    "to_plain_text",
]
