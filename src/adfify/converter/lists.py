"""List classification and list/task item builders.

A list whose items are *all* task items becomes one or more ``taskList``
nodes (see :mod:`adfify.converter.task_lists`); any other list becomes a
``bulletList`` or ``orderedList`` of ``listItem`` nodes, ignoring the task
flags of individual items.

Item content is scanned in order.  Runs of consecutive inline-bearing
tokens are grouped: a ``listItem`` wraps each run in a paragraph, while a
``taskItem`` holds the inline nodes directly.
"""

from __future__ import annotations

from typing import Any

from adfify.converter.context import BuildContext
from adfify.converter.inline import build_inline
from adfify.converter.paragraphs import build_paragraph
from adfify.models import AdfNode

INLINE_TOKEN_TYPES: frozenset[str] = frozenset({
    "text",
    "emphasis",
    "strong",
    "strikethrough",
    "link",
    "codespan",
})


def is_task_list(token: dict[str, Any]) -> bool:
    """Return True when *token* has items and every item is a task.

    An empty list is never a task list.
    """
    items = token["items"]
    return bool(items) and all(item.get("task") for item in items)


def build_list(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    """Build the node(s) for a list token.

    Task lists may yield several siblings; ordinary lists yield exactly one.
    """
    if is_task_list(token):
        from adfify.converter.task_lists import extract_task_lists
        return extract_task_lists(token["items"], ctx)
    return [build_ordinary_list(token, ctx)]


def build_ordinary_list(token: dict[str, Any], ctx: BuildContext) -> AdfNode:
    """Build a ``bulletList`` or ``orderedList`` node."""
    ordered = bool(token.get("ordered"))
    with ctx.nesting("list"):
        items = [build_list_item(item, ctx) for item in token["items"]]

    node: AdfNode = {"type": "orderedList" if ordered else "bulletList"}
    if ordered:
        node["attrs"] = {"order": token.get("start") or 1}
    node["content"] = items
    return node


def build_list_item(item: dict[str, Any], ctx: BuildContext) -> AdfNode:
    """Build a ``listItem`` node from a non-task list item."""
    content: list[AdfNode] = []
    pending: list[dict[str, Any]] = []

    for token in item.get("tokens") or []:
        token_type = token.get("type")
        if token_type in INLINE_TOKEN_TYPES:
            pending.append(token)
            continue

        if pending:
            content.append(build_paragraph(pending))
            pending = []

        if token_type == "list":
            content.extend(build_list(token, ctx))
        else:
            content.extend(_convert_block(token, ctx))

    if pending:
        content.append(build_paragraph(pending))

    return {"type": "listItem", "content": content}


def build_task_item(item: dict[str, Any], ctx: BuildContext) -> AdfNode:
    """Build a ``taskItem`` node.

    Nested lists are skipped here; task-list extraction places them as
    siblings of the enclosing ``taskList``.
    """
    content: list[AdfNode] = []
    pending: list[dict[str, Any]] = []

    for token in item.get("tokens") or []:
        token_type = token.get("type")
        if token_type in INLINE_TOKEN_TYPES:
            pending.append(token)
            continue

        if pending:
            content.extend(build_inline(pending))
            pending = []

        if token_type != "list":
            content.extend(_convert_block(token, ctx))

    if pending:
        content.extend(build_inline(pending))

    return {
        "type": "taskItem",
        "attrs": {
            "localId": ctx.new_id(),
            "state": "DONE" if item.get("checked") else "TODO",
        },
        "content": content,
    }


def _convert_block(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    from adfify.converter.block_builder import convert_token
    return convert_token(token, ctx)
