"""Task-list extraction that preserves document order.

ADF only allows ``taskItem`` and nested ``taskList`` nodes inside a
``taskList``.  Ordinary lists nested under a task item therefore have to
become *siblings* of the task list, and they must stay at their original
position.  For::

    - [x] Task 1
      - 1.1
      - 1.2
    - [x] Task 2

the output is ``taskList([Task 1]), bulletList([1.1, 1.2]), taskList([Task 2])``
rather than ``taskList([Task 1, Task 2]), bulletList([1.1, 1.2])``.

The work is split into two phases over a sequence of
:class:`~adfify.models.TaggedNode` entries:

1. :func:`flatten_task_items` walks the items in document order and tags
   every produced node as ``TASK`` (stays in a task list) or
   ``EXTRACTED`` (hoisted ordinary list).  Nested task lists stay nested;
   ordinary lists found below them bubble up one level at a time.
2. :func:`regroup_task_entries` folds consecutive ``TASK`` entries into
   ``taskList`` containers, splitting wherever an ``EXTRACTED`` entry
   appears.
"""

from __future__ import annotations

from typing import Any

from adfify.converter.context import BuildContext
from adfify.converter.lists import build_ordinary_list, build_task_item, is_task_list
from adfify.models import AdfNode, EntryTag, TaggedNode


def extract_task_lists(items: list[dict[str, Any]], ctx: BuildContext) -> list[AdfNode]:
    """Convert the items of a task list into ordered sibling nodes."""
    with ctx.nesting("list"):
        entries = flatten_task_items(items, ctx)
    return regroup_task_entries(entries, ctx)


def flatten_task_items(items: list[dict[str, Any]], ctx: BuildContext) -> list[TaggedNode]:
    """Phase 1: emit tagged nodes for *items* in document order."""
    entries: list[TaggedNode] = []

    for item in items:
        entries.append(TaggedNode(EntryTag.TASK, build_task_item(item, ctx)))

        for token in item.get("tokens") or []:
            if token.get("type") != "list":
                continue

            if is_task_list(token):
                with ctx.nesting("list"):
                    nested = flatten_task_items(token["items"], ctx)
                nested_tasks = [entry.node for entry in nested if entry.tag is EntryTag.TASK]
                entries.append(TaggedNode(EntryTag.TASK, _task_list(nested_tasks, ctx)))
                entries.extend(entry for entry in nested if entry.tag is EntryTag.EXTRACTED)
            else:
                entries.append(TaggedNode(EntryTag.EXTRACTED, build_ordinary_list(token, ctx)))

    return entries


def regroup_task_entries(entries: list[TaggedNode], ctx: BuildContext) -> list[AdfNode]:
    """Phase 2: group consecutive ``TASK`` nodes into ``taskList`` containers."""
    result: list[AdfNode] = []
    pending: list[AdfNode] = []

    for entry in entries:
        if entry.tag is EntryTag.TASK:
            pending.append(entry.node)
            continue

        if pending:
            result.append(_task_list(pending, ctx))
            pending = []
        result.append(entry.node)
        ctx.hoisted += 1

    if pending:
        result.append(_task_list(pending, ctx))

    return result


def _task_list(content: list[AdfNode], ctx: BuildContext) -> AdfNode:
    return {
        "type": "taskList",
        "attrs": {"localId": ctx.new_id()},
        "content": content,
    }
