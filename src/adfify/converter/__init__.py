"""Markdown to ADF conversion pipeline.

Public API:

- :class:`MarkdownToAdfConverter`: Markdown text → ADF document.
- :func:`markdown_to_adf`: one-shot convenience wrapper.
- :class:`MarkdownTokenizer`: parse Markdown into canonical tokens.
- :func:`build_nodes`: convert canonical block tokens to ADF nodes.
- :func:`build_inline`: convert inline tokens to ADF text nodes.
- :func:`extract_task_lists`: order-preserving task-list extraction.
"""

from adfify.converter.block_builder import build_nodes
from adfify.converter.context import BuildContext
from adfify.converter.inline import build_inline, resolve_marks, safe_text
from adfify.converter.md_to_adf import MarkdownToAdfConverter, markdown_to_adf
from adfify.converter.task_lists import extract_task_lists
from adfify.converter.tokenizer import MarkdownTokenizer

__all__ = [
    "BuildContext",
    "MarkdownToAdfConverter",
    "MarkdownTokenizer",
    "build_inline",
    "build_nodes",
    "extract_task_lists",
    "markdown_to_adf",
    "resolve_marks",
    "safe_text",
]
