"""
Task document parsing: Markdown → document nodes → TaskMap.

Example:
    >>> from mkdo.parser import extract, parse_document
    >>> task_map = extract(parse_document("# Tasks\\n## hi\\n```bash\\necho hi\\n```\\n"))
    >>> list(task_map)
    ['hi']
"""

from mkdo.parser.extractor import extract
from mkdo.parser.loader import load_tasks
from mkdo.parser.markdown import create_parser, parse_document, to_plain_text
from mkdo.parser.nodes import CodeBlock, DocumentNode, Heading, Other

__all__ = [
    "CodeBlock",
    "DocumentNode",
    "Heading",
    "Other",
    "create_parser",
    "extract",
    "load_tasks",
    "parse_document",
    "to_plain_text",
]
