"""Converter configuration for adfify.

:class:`AdfifyConfig` is a plain dataclass that captures every tuneable
knob exposed by the converter.  Instances are passed to
:class:`~adfify.converter.md_to_adf.MarkdownToAdfConverter` and to
:func:`adfify.markdown_to_adf`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from adfify.utils.ids import generate_local_id

MEDIA_LAYOUTS: tuple[str, ...] = (
    "center",
    "wide",
    "full-width",
    "align-start",
    "align-end",
)
"""Layouts accepted for ``mediaSingle`` nodes."""


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class AdfifyConfig:
    """Complete configuration for a Markdown-to-ADF converter.

    Every parameter has a sensible default, so ``AdfifyConfig()`` is a
    valid configuration.

    Parameters
    ----------
    id_generator:
        Zero-argument callable returning a fresh ``localId`` string for
        ``taskList`` and ``taskItem`` nodes.  Defaults to random UUID4
        strings; pass :func:`adfify.utils.sequential_ids` for
        reproducible output.
    media_layout:
        ``layout`` attribute written on every ``mediaSingle`` node.
    max_nesting_depth:
        Maximum container nesting (block quotes and lists) accepted before
        :class:`~adfify.errors.AdfifyNestingDepthError` is raised.
        ``None`` disables the check.
    metrics:
        Optional :class:`~adfify.observability.MetricsHook` receiving
        conversion counters and timings.
    debug_dump_tokens:
        Write the canonical input tokens to *stderr* on each conversion.
    debug_dump_document:
        Write the produced ADF document to *stderr*.
    """

    # ── Identifiers ────────────────────────────────────────────────────
    id_generator: Callable[[], str] = generate_local_id

    # ── Media ──────────────────────────────────────────────────────────
    media_layout: Literal[
        "center", "wide", "full-width", "align-start", "align-end",
    ] = "center"

    # ── Limits ─────────────────────────────────────────────────────────
    max_nesting_depth: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ──────────────────────────────────────────────────────────
    debug_dump_tokens: bool = False

    debug_dump_document: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not callable(self.id_generator):
            raise ValueError(
                f"id_generator must be callable, got {type(self.id_generator).__name__}"
            )
        if self.media_layout not in MEDIA_LAYOUTS:
            raise ValueError(
                f"media_layout must be one of {', '.join(MEDIA_LAYOUTS)}, "
                f"got {self.media_layout!r}"
            )
        if self.max_nesting_depth is not None and self.max_nesting_depth < 1:
            raise ValueError(
                f"max_nesting_depth must be >= 1 or None, got {self.max_nesting_depth}"
            )

    def __repr__(self) -> str:
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "id_generator":
                parts.append(f"id_generator={getattr(val, '__name__', val)!s}")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"AdfifyConfig({', '.join(parts)})"
