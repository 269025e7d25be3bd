"""Parse Markdown and normalize it to the canonical token model.

This module wraps mistune v3's AST mode and rewrites its raw token stream
into the flat, typed token dicts consumed by the rest of the converter.

Canonical block tokens::

    paragraph       {"tokens"}
    heading         {"depth", "tokens"}
    list            {"ordered", "start", "items"}
    list_item       {"task", "checked", "tokens"}
    block_code      {"text", "lang"?}
    block_quote     {"tokens"}
    thematic_break  {}
    table           {"header": [cell], "rows": [[cell]]}   cell = {"tokens", "align"}

Canonical inline tokens::

    text            {"text", "tokens"?}
    emphasis, strong, strikethrough   {"text", "tokens"}
    link            {"href", "text", "tokens", "title"?}
    codespan        {"text"}
    image           {"href", "text", "title"?}
    linebreak       {}

List-item content is lexed as "non-top-level" text: paragraphs directly
inside a list item become block-level ``text`` tokens carrying their
inline ``tokens``, and blank lines between them become ``space`` tokens.
Raw HTML becomes ``html`` tokens.  Both ``space`` and ``html`` are left
for the converter to drop.
"""

from __future__ import annotations

from typing import Any

import mistune

# Inline wrappers whose children are normalized recursively.
_INLINE_WRAPPERS: frozenset[str] = frozenset({
    "emphasis",
    "strong",
    "strikethrough",
})

_PLUGINS: list[str] = [
    "strikethrough",
    "table",
    "task_lists",
    "url",
]


class MarkdownTokenizer:
    """Parse Markdown into canonical tokens."""

    def __init__(self) -> None:
        self._parser = mistune.create_markdown(renderer="ast", plugins=_PLUGINS)

    def parse(self, markdown: str) -> list[dict[str, Any]]:
        """Parse *markdown* and return the canonical block token list."""
        raw_tokens = self._parser(markdown)
        if isinstance(raw_tokens, str):
            return []
        return self._normalize_blocks(raw_tokens)

    # ── Block level ────────────────────────────────────────────────────

    def _normalize_blocks(
        self,
        tokens: list[dict[str, Any]],
        *,
        in_list_item: bool = False,
    ) -> list[dict[str, Any]]:
        result: list[dict[str, Any]] = []
        for token in tokens:
            normalized = self._normalize_block(token, in_list_item)
            if normalized is not None:
                result.append(normalized)
        return result

    def _normalize_block(
        self,
        token: dict[str, Any],
        in_list_item: bool,
    ) -> dict[str, Any] | None:
        raw_type = token.get("type", "")
        attrs = token.get("attrs") or {}

        if raw_type == "blank_line":
            return {"type": "space"} if in_list_item else None

        if raw_type in ("paragraph", "block_text"):
            children = self._normalize_inline_tokens(token.get("children", []))
            if raw_type == "block_text" or in_list_item:
                return {"type": "text", "text": _plain_text(children), "tokens": children}
            return {"type": "paragraph", "tokens": children}

        if raw_type == "heading":
            return {
                "type": "heading",
                "depth": attrs.get("level", 1),
                "tokens": self._normalize_inline_tokens(token.get("children", [])),
            }

        if raw_type == "list":
            ordered = bool(attrs.get("ordered", False))
            return {
                "type": "list",
                "ordered": ordered,
                # mistune only records ``start`` when it differs from 1
                "start": attrs.get("start", 1) if ordered else None,
                "items": [
                    self._normalize_list_item(child)
                    for child in token.get("children", [])
                    if child.get("type") in ("list_item", "task_list_item")
                ],
            }

        if raw_type == "block_code":
            raw_code = token.get("raw", "")
            # mistune keeps the newline before the closing fence
            if raw_code.endswith("\n"):
                raw_code = raw_code[:-1]
            result: dict[str, Any] = {"type": "block_code", "text": raw_code}
            info = (attrs.get("info") or "").strip()
            if info:
                result["lang"] = info.split()[0]
            return result

        if raw_type == "block_quote":
            return {
                "type": "block_quote",
                "tokens": self._normalize_blocks(token.get("children", [])),
            }

        if raw_type == "thematic_break":
            return {"type": "thematic_break"}

        if raw_type == "table":
            return self._normalize_table(token)

        if raw_type == "block_html":
            return {"type": "html", "text": token.get("raw", "")}

        # Anything else keeps its type so the converter can drop it.
        return {"type": raw_type}

    def _normalize_list_item(self, token: dict[str, Any]) -> dict[str, Any]:
        is_task = token.get("type") == "task_list_item"
        checked = bool((token.get("attrs") or {}).get("checked", False))
        return {
            "type": "list_item",
            "task": is_task,
            "checked": checked if is_task else False,
            "tokens": self._normalize_blocks(token.get("children", []), in_list_item=True),
        }

    def _normalize_table(self, token: dict[str, Any]) -> dict[str, Any]:
        header: list[dict[str, Any]] = []
        rows: list[list[dict[str, Any]]] = []
        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "table_head":
                header = [self._normalize_cell(cell) for cell in child.get("children", [])]
            elif child_type == "table_body":
                rows.extend(
                    [self._normalize_cell(cell) for cell in row.get("children", [])]
                    for row in child.get("children", [])
                    if row.get("type") == "table_row"
                )
        return {"type": "table", "header": header, "rows": rows}

    def _normalize_cell(self, cell: dict[str, Any]) -> dict[str, Any]:
        return {
            "tokens": self._normalize_inline_tokens(cell.get("children", [])),
            "align": (cell.get("attrs") or {}).get("align"),
        }

    # ── Inline level ───────────────────────────────────────────────────

    def _normalize_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Normalize inline tokens, merging adjacent plain text runs.

        mistune splits text around delimiter runs and soft line breaks;
        merging keeps one ``text`` token per run so wrapped source lines
        collapse to a single output text node.  Empty text runs (mistune
        emits one for a blank table cell) are left out.
        """
        result: list[dict[str, Any]] = []
        for token in tokens:
            normalized = self._normalize_inline(token)
            if normalized is None:
                continue
            if normalized["type"] == "text" and not normalized["text"]:
                continue
            if (
                normalized["type"] == "text"
                and result
                and result[-1]["type"] == "text"
            ):
                result[-1] = {"type": "text", "text": result[-1]["text"] + normalized["text"]}
            else:
                result.append(normalized)
        return result

    def _normalize_inline(self, token: dict[str, Any]) -> dict[str, Any] | None:
        raw_type = token.get("type", "")
        attrs = token.get("attrs") or {}

        if raw_type == "text":
            return {"type": "text", "text": token.get("raw", "")}

        if raw_type == "softbreak":
            return {"type": "text", "text": "\n"}

        if raw_type == "linebreak":
            return {"type": "linebreak"}

        if raw_type == "codespan":
            return {"type": "codespan", "text": token.get("raw", "")}

        if raw_type in _INLINE_WRAPPERS:
            children = self._normalize_inline_tokens(token.get("children", []))
            return {"type": raw_type, "text": _plain_text(children), "tokens": children}

        if raw_type == "link":
            children = self._normalize_inline_tokens(token.get("children", []))
            result: dict[str, Any] = {
                "type": "link",
                "href": attrs.get("url", ""),
                "text": _plain_text(children),
                "tokens": children,
            }
            if attrs.get("title"):
                result["title"] = attrs["title"]
            return result

        if raw_type == "image":
            children = self._normalize_inline_tokens(token.get("children", []))
            result = {
                "type": "image",
                "href": attrs.get("url", ""),
                "text": _plain_text(children),
            }
            if attrs.get("title"):
                result["title"] = attrs["title"]
            return result

        if raw_type == "inline_html":
            return {"type": "html", "text": token.get("raw", "")}

        return {"type": raw_type}


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    """Concatenate the plain text carried by already-normalized tokens."""
    parts: list[str] = []
    for token in tokens:
        if token["type"] == "linebreak":
            parts.append("\n")
        elif token["type"] != "html":
            parts.append(token.get("text", ""))
    return "".join(parts)
