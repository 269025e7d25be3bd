"""Split paragraph inline runs around images.

ADF paragraphs cannot hold images, so every image in a paragraph becomes
a ``mediaSingle`` node between the paragraph fragments around it::

    text ![a](x.png) more   ->   paragraph, mediaSingle, paragraph
"""

from __future__ import annotations

from typing import Any

from adfify.converter.context import BuildContext
from adfify.converter.inline import build_inline
from adfify.models import AdfNode


def split_paragraph(tokens: list[dict[str, Any]] | None, ctx: BuildContext) -> list[AdfNode]:
    """Convert one paragraph's inline tokens into paragraph and media nodes."""
    if not tokens:
        return []

    if len(tokens) == 1 and tokens[0].get("type") == "image":
        return [build_media(tokens[0], ctx)]

    nodes: list[AdfNode] = []
    pending: list[dict[str, Any]] = []

    for token in tokens:
        if token.get("type") == "image":
            if pending:
                nodes.append(build_paragraph(pending))
                pending = []
            nodes.append(build_media(token, ctx))
        else:
            pending.append(token)

    if pending:
        nodes.append(build_paragraph(pending))

    return nodes


def build_paragraph(tokens: list[dict[str, Any]]) -> AdfNode:
    """Wrap the inline content of *tokens* in a ``paragraph`` node."""
    return {"type": "paragraph", "content": build_inline(tokens)}


def build_media(token: dict[str, Any], ctx: BuildContext) -> AdfNode:
    """Build a ``mediaSingle`` container for an external image."""
    return {
        "type": "mediaSingle",
        "attrs": {"layout": ctx.config.media_layout},
        "content": [
            {
                "type": "media",
                "attrs": {
                    "type": "external",
                    "url": token["href"],
                    "alt": token.get("text") or "",
                },
            },
        ],
    }
