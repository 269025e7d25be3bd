"""Per-conversion state shared by the block, list and table builders."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from adfify.config import AdfifyConfig
from adfify.errors import AdfifyNestingDepthError
from adfify.observability import get_logger

log = get_logger("adfify.converter", level=logging.WARNING)


class BuildContext:
    """Mutable accumulator for one conversion pass.

    Holds the configuration, the current and deepest container nesting
    depth, and the counters reported as metrics once the pass completes.
    A context is never shared between conversions.
    """

    __slots__ = ("config", "depth", "max_depth", "dropped", "hoisted")

    def __init__(self, config: AdfifyConfig) -> None:
        self.config = config
        self.depth = 0
        self.max_depth = 0
        self.dropped = 0
        self.hoisted = 0

    def new_id(self) -> str:
        """Return a fresh ``localId`` from the configured generator."""
        return self.config.id_generator()

    @contextmanager
    def nesting(self, token_type: str) -> Iterator[None]:
        """Track one level of container nesting for the enclosed build.

        Raises
        ------
        AdfifyNestingDepthError
            If entering would exceed ``config.max_nesting_depth``.
        """
        depth = self.depth + 1
        limit = self.config.max_nesting_depth
        if limit is not None and depth > limit:
            raise AdfifyNestingDepthError(
                message=f"Nesting depth {depth} exceeds the limit of {limit}.",
                context={"depth": depth, "limit": limit, "token_type": token_type},
            )
        self.depth = depth
        self.max_depth = max(self.max_depth, depth)
        try:
            yield
        finally:
            self.depth -= 1

    def drop(self, token: dict[str, Any]) -> None:
        """Record a token that produces no output."""
        self.dropped += 1
        log.debug(
            "token dropped",
            extra={"extra_fields": {"token_type": token.get("type", ""), "depth": self.depth}},
        )
