"""Data models shared across the converter.

Input tokens and output ADF nodes are plain ``dict`` objects (they are
JSON-shaped on both ends), so this module only holds the few types that
exist *between* stages: the tagged entries exchanged by the two phases
of task-list extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

AdfNode = dict[str, Any]
"""An ADF node: ``{"type", "attrs"?, "content"?, "marks"?, "text"?}``."""

AdfMark = dict[str, Any]
"""An ADF mark: ``{"type", "attrs"?}``."""

Token = dict[str, Any]
"""A canonical input token (see :mod:`adfify.converter.tokenizer`)."""


# ---------------------------------------------------------------------------
# Task-list extraction entries
# ---------------------------------------------------------------------------

class EntryTag(str, Enum):
    """Where a node produced by task-list flattening belongs."""

    TASK = "task"
    """A ``taskItem`` or nested ``taskList``; stays inside a ``taskList``."""

    EXTRACTED = "extracted"
    """An ordinary list hoisted out of a task item; becomes a sibling."""


@dataclass(frozen=True)
class TaggedNode:
    """One entry of the flattened task-list sequence.

    Attributes
    ----------
    tag:
        Whether *node* belongs inside a ``taskList`` or next to it.
    node:
        The ADF node itself.
    """

    tag: EntryTag
    node: AdfNode
