"""Build ADF inline content from canonical inline tokens.

An ADF text node is::

    {"type": "text", "text": "hello", "marks": [{"type": "strong"}]}

and a hard line break is ``{"type": "hardBreak"}``.

Marks are resolved along chains of singly-nested tokens, so
``**[*a*](https://x)**`` collapses to one text node carrying ``strong``,
``link`` and ``em``.  A ``code`` mark only tolerates ``link`` next to it;
any other decoration is discarded once ``code`` is present.
"""

from __future__ import annotations

import re
from typing import Any

from adfify.models import AdfMark, AdfNode

_WRAPPER_MARKS: dict[str, str] = {
    "emphasis": "em",
    "strong": "strong",
    "strikethrough": "strike",
}

_CODE_COMPATIBLE_MARKS: frozenset[str] = frozenset({"code", "link"})

_WHITESPACE_RUN = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_inline(tokens: list[dict[str, Any]] | None) -> list[AdfNode]:
    """Convert inline tokens to a flat list of ADF text/hardBreak nodes.

    Text nodes whose text ends up empty are left out.
    """
    nodes: list[AdfNode] = []
    for token in tokens or []:
        nodes.extend(_inline_nodes(token))
    return [node for node in nodes if node["type"] != "text" or node.get("text")]


def resolve_marks(
    token: dict[str, Any],
    marks: dict[str, AdfMark] | None = None,
) -> list[AdfMark]:
    """Return the ordered marks applying to the text reached from *token*.

    *marks* is the map accumulated by enclosing tokens, keyed by mark
    type.  It is copied, never modified.  Resolution descends while the
    current token has exactly one nested token; at the first token with
    zero or several children the map is finalized.

    Examples
    --------
    >>> strong = {"type": "strong", "tokens": [{"type": "codespan", "text": "x"}]}
    >>> resolve_marks(strong)
    [{'type': 'code'}]
    """
    resolved = dict(marks) if marks else {}
    token_type = token.get("type")

    if token_type in _WRAPPER_MARKS:
        mark_type = _WRAPPER_MARKS[token_type]
        if mark_type not in resolved:
            resolved[mark_type] = {"type": mark_type}
    elif token_type == "link":
        # Innermost link wins.
        resolved["link"] = {"type": "link", "attrs": {"href": token.get("href", "")}}
    elif token_type == "codespan" and "code" not in resolved:
        resolved["code"] = {"type": "code"}

    nested = token.get("tokens") or []
    if len(nested) == 1:
        return resolve_marks(nested[0], resolved)

    if "code" in resolved:
        return [mark for mark in resolved.values() if mark["type"] in _CODE_COMPATIBLE_MARKS]
    return list(resolved.values())


def safe_text(token: dict[str, Any]) -> str:
    """Extract single-line display text from *token*.

    Unwraps tokens holding exactly one nested text-bearing token, then
    normalizes the literal text with :func:`normalize_text`.  Tokens
    without text (e.g. ``linebreak``) yield ``""``.
    """
    nested = token.get("tokens") or []
    if len(nested) == 1 and "text" in nested[0]:
        return safe_text(nested[0])
    if "text" in token:
        return normalize_text(token["text"])
    return ""


def normalize_text(text: str) -> str:
    """Fold hard-wrapped source text onto one line.

    Strips one trailing newline, turns the remaining newlines into
    spaces and collapses whitespace runs to a single space.  Applying it
    to its own output is a no-op.

    Examples
    --------
    >>> normalize_text("wrapped\\nline  of   text\\n")
    'wrapped line of text'
    """
    if text.endswith("\n"):
        text = text[:-1]
    return _WHITESPACE_RUN.sub(" ", text.replace("\n", " "))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _inline_nodes(token: dict[str, Any]) -> list[AdfNode]:
    token_type = token.get("type")

    if token_type == "text":
        if token.get("tokens") is not None:
            return build_inline(token["tokens"])
        return [{"type": "text", "text": safe_text(token)}]

    if token_type in _WRAPPER_MARKS:
        mark_type = _WRAPPER_MARKS[token_type]
        return [
            {
                "type": "text",
                "text": safe_text(child),
                "marks": resolve_marks(child, {mark_type: {"type": mark_type}}),
            }
            for child in token.get("tokens") or []
        ]

    if token_type in ("link", "codespan"):
        return [{"type": "text", "text": safe_text(token), "marks": resolve_marks(token)}]

    if token_type == "linebreak":
        return [{"type": "hardBreak"}]

    # Unknown inline types are silently skipped
    return []
