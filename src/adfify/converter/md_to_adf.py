"""Full Markdown-to-ADF conversion pipeline.

:class:`MarkdownToAdfConverter` runs two stages:

1. **Tokenize**: :class:`MarkdownTokenizer` parses the Markdown with
   mistune and normalizes it to canonical tokens.
2. **Build**: :func:`build_nodes` converts the tokens into ADF nodes,
   which are wrapped in a ``doc`` root.

The converter is also the error boundary: structural faults in the token
tree surface as :class:`AdfifyMalformedTokenError`.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from collections.abc import Callable
from typing import Any

from adfify.config import AdfifyConfig
from adfify.converter.block_builder import build_nodes
from adfify.converter.context import BuildContext
from adfify.converter.tokenizer import MarkdownTokenizer
from adfify.errors import AdfifyMalformedTokenError
from adfify.models import AdfNode
from adfify.observability import NoopMetricsHook, get_logger

log = get_logger("adfify.converter", level=logging.WARNING)

ADF_VERSION = 1


class MarkdownToAdfConverter:
    """Convert Markdown text to an Atlassian Document Format document.

    Parameters
    ----------
    config:
        Converter configuration.  Defaults to ``AdfifyConfig()``.
    tokenizer:
        Callable turning Markdown text into canonical block tokens.
        Defaults to :meth:`MarkdownTokenizer.parse`.

    Examples
    --------
    >>> converter = MarkdownToAdfConverter()
    >>> doc = converter.convert("# Hello\\n\\nWorld")
    >>> [node["type"] for node in doc["content"]]
    ['heading', 'paragraph']
    """

    def __init__(
        self,
        config: AdfifyConfig | None = None,
        *,
        tokenizer: Callable[[str], list[dict[str, Any]]] | None = None,
    ) -> None:
        self._config = config if config is not None else AdfifyConfig()
        self._tokenize = tokenizer if tokenizer is not None else MarkdownTokenizer().parse
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    def convert(self, markdown: str) -> AdfNode:
        """Tokenize *markdown* and convert it to an ADF document.

        Returns
        -------
        dict
            ``{"version": 1, "type": "doc", "content": [...]}``
        """
        return self.convert_tokens(self._tokenize(markdown))

    def convert_tokens(self, tokens: list[dict[str, Any]]) -> AdfNode:
        """Convert already-tokenized canonical block tokens to an ADF document.

        Raises
        ------
        AdfifyMalformedTokenError
            If the token tree lacks a field the engine relies on.
        AdfifyNestingDepthError
            If ``max_nesting_depth`` is configured and exceeded.
        """
        if self._config.debug_dump_tokens:
            print(
                "[adfify] Canonical tokens:",
                json.dumps(tokens, indent=2, ensure_ascii=False, default=str),
                file=sys.stderr,
            )

        t0 = time.monotonic()
        ctx = BuildContext(self._config)
        try:
            content = build_nodes(tokens, ctx)
        except (KeyError, TypeError, AttributeError) as exc:
            log.warning(
                "malformed token tree",
                extra={"extra_fields": {
                    "error_type": type(exc).__name__,
                    "detail": str(exc),
                }},
            )
            raise AdfifyMalformedTokenError(
                message=f"Malformed token tree: {type(exc).__name__}: {exc}",
                context={"error_type": type(exc).__name__, "detail": str(exc)},
                cause=exc,
            ) from exc
        elapsed_ms = (time.monotonic() - t0) * 1000

        self._metrics.increment("adfify.conversions_total")
        self._metrics.timing("adfify.conversion_duration_ms", elapsed_ms)
        self._metrics.increment("adfify.nodes_emitted_total", len(content))
        self._metrics.gauge("adfify.max_nesting_depth", ctx.max_depth)
        if ctx.dropped:
            self._metrics.increment("adfify.tokens_dropped_total", ctx.dropped)
        if ctx.hoisted:
            self._metrics.increment("adfify.lists_hoisted_total", ctx.hoisted)

        log.debug(
            "conversion complete",
            extra={"extra_fields": {
                "nodes": len(content),
                "dropped": ctx.dropped,
                "hoisted": ctx.hoisted,
                "max_depth": ctx.max_depth,
                "duration_ms": round(elapsed_ms, 3),
            }},
        )

        document: AdfNode = {"version": ADF_VERSION, "type": "doc", "content": content}

        if self._config.debug_dump_document:
            print(
                "[adfify] ADF document:",
                json.dumps(document, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        return document


def markdown_to_adf(markdown: str, config: AdfifyConfig | None = None) -> AdfNode:
    """Convert *markdown* to an ADF document in one call.

    Examples
    --------
    >>> doc = markdown_to_adf("---")
    >>> doc["content"]
    [{'type': 'rule'}]
    """
    return MarkdownToAdfConverter(config).convert(markdown)
