"""Convert canonical block tokens to ADF nodes.

Block mapping:

- paragraph -> paragraph(s), split around images into mediaSingle nodes
- heading -> heading with ``attrs.level``
- list -> bulletList / orderedList, or taskList(s) when every item is a task
- block_code -> codeBlock (``attrs.language`` only when declared)
- block_quote -> blockquote with recursively converted content
- thematic_break -> rule
- table -> delegate to tables.py

Any other token type produces no output.  That keeps the converter
usable with tokenizers that emit extra token kinds.
"""

from __future__ import annotations

from collections.abc import Callable as _Callable
from typing import Any

from adfify.converter.context import BuildContext
from adfify.converter.inline import build_inline
from adfify.converter.lists import build_list
from adfify.converter.paragraphs import split_paragraph
from adfify.converter.tables import build_table
from adfify.models import AdfNode

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_nodes(tokens: list[dict[str, Any]] | None, ctx: BuildContext) -> list[AdfNode]:
    """Convert block tokens to a flat, ordered list of ADF nodes.

    One token may produce zero, one or several nodes.

    Parameters
    ----------
    tokens:
        Canonical block tokens from :class:`MarkdownTokenizer` (or any
        tokenizer producing the same model).
    ctx:
        State for the current conversion pass.
    """
    produced: list[AdfNode] = []
    for token in tokens or []:
        produced.extend(convert_token(token, ctx))
    return produced


def convert_token(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    """Convert a single block token and return the node(s) produced."""
    handler = _BLOCK_HANDLERS.get(token.get("type", ""))
    if handler is not None:
        return handler(token, ctx)
    ctx.drop(token)
    return []


# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------

def _build_paragraph(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    return split_paragraph(token.get("tokens"), ctx)


def _build_heading(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    return [{
        "type": "heading",
        "attrs": {"level": token["depth"]},
        "content": build_inline(token.get("tokens")),
    }]


def _build_code_block(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    """Build a codeBlock node.

    The language attribute is omitted rather than defaulted so that a
    fence without an info string round-trips as one.
    """
    block: AdfNode = {"type": "codeBlock"}
    if token.get("lang"):
        block["attrs"] = {"language": token["lang"]}
    text = token["text"]
    # ADF rejects empty text nodes; an empty fence has no content.
    block["content"] = [{"type": "text", "text": text}] if text else []
    return [block]


def _build_block_quote(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    with ctx.nesting("block_quote"):
        content = build_nodes(token.get("tokens"), ctx)
    return [{"type": "blockquote", "content": content}]


def _build_rule(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    return [{"type": "rule"}]


def _build_table(token: dict[str, Any], ctx: BuildContext) -> list[AdfNode]:
    return [build_table(token, ctx)]


# ---------------------------------------------------------------------------
# Block handler dispatch table
# ---------------------------------------------------------------------------

_BlockHandler = _Callable[[dict[str, Any], BuildContext], list[AdfNode]]

_BLOCK_HANDLERS: dict[str, _BlockHandler] = {
    "paragraph": _build_paragraph,
    "heading": _build_heading,
    "list": build_list,
    "block_code": _build_code_block,
    "block_quote": _build_block_quote,
    "thematic_break": _build_rule,
    "table": _build_table,
}
