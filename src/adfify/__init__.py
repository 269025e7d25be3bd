"""adfify: Markdown to Atlassian Document Format (ADF) converter.

Public re-exports
-----------------

* **Conversion:** :func:`markdown_to_adf`, :class:`MarkdownToAdfConverter`
* **Configuration:** :class:`AdfifyConfig`
* **Errors:** Every :class:`AdfifyError` subclass and :class:`ErrorCode`
* **Identifiers:** :func:`generate_local_id`, :func:`sequential_ids`

Usage::

    from adfify import markdown_to_adf

    doc = markdown_to_adf("- [ ] Write docs\\n- [x] Ship it")
    doc["content"][0]["type"]   # 'taskList'
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from adfify.config import AdfifyConfig

# ── Conversion ──────────────────────────────────────────────────────────
from adfify.converter.md_to_adf import MarkdownToAdfConverter, markdown_to_adf

# ── Errors ──────────────────────────────────────────────────────────────
from adfify.errors import (
    AdfifyConversionError,
    AdfifyError,
    AdfifyMalformedTokenError,
    AdfifyNestingDepthError,
    ErrorCode,
)

# ── Identifiers ─────────────────────────────────────────────────────────
from adfify.utils.ids import generate_local_id, sequential_ids

__all__ = [
    # Conversion
    "markdown_to_adf",
    "MarkdownToAdfConverter",
    # Configuration
    "AdfifyConfig",
    # Errors
    "AdfifyError",
    "ErrorCode",
    "AdfifyConversionError",
    "AdfifyMalformedTokenError",
    "AdfifyNestingDepthError",
    # Identifiers
    "generate_local_id",
    "sequential_ids",
]
