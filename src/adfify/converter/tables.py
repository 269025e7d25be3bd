"""Table conversion: canonical table token to ADF ``table`` node.

The input token looks like::

    {
        "type": "table",
        "header": [{"tokens": [inline...], "align": None}, ...],
        "rows": [
            [{"tokens": [inline...], "align": None}, ...],
            ...
        ],
    }

and the resulting node::

    {
        "type": "table",
        "content": [
            {"type": "tableRow", "content": [
                {"type": "tableHeader", "content": [<paragraph/media nodes>]},
                ...
            ]},
            {"type": "tableRow", "content": [
                {"type": "tableCell", "content": [<paragraph/media nodes>]},
                ...
            ]},
            ...
        ],
    }

ADF rejects empty cells, so a cell without content gets a paragraph
holding a single space.
"""

from __future__ import annotations

from typing import Any

from adfify.converter.context import BuildContext
from adfify.converter.paragraphs import split_paragraph
from adfify.models import AdfNode

EMPTY_CELL_TEXT = " "


def build_table(token: dict[str, Any], ctx: BuildContext) -> AdfNode:
    """Build an ADF table node from a table token.

    The header row is only emitted when the token has header cells.
    """
    rows: list[AdfNode] = []

    header = token.get("header") or []
    if header:
        rows.append({
            "type": "tableRow",
            "content": [_build_cell("tableHeader", cell, ctx) for cell in header],
        })

    for row in token["rows"]:
        rows.append({
            "type": "tableRow",
            "content": [_build_cell("tableCell", cell, ctx) for cell in row],
        })

    return {"type": "table", "content": rows}


def _build_cell(cell_type: str, cell: dict[str, Any], ctx: BuildContext) -> AdfNode:
    # Paragraphs whose inline content was all dropped are discarded.
    content = [
        node for node in split_paragraph(cell.get("tokens"), ctx)
        if node["type"] != "paragraph" or node["content"]
    ]
    if not content:
        content = [{
            "type": "paragraph",
            "content": [{"type": "text", "text": EMPTY_CELL_TEXT}],
        }]
    return {"type": cell_type, "content": content}
