"""Metrics hook protocol and no-op default implementation.

The converter reports a handful of counters and timings per conversion.
Without a configured backend a :class:`NoopMetricsHook` swallows them.
Any object with matching ``increment`` / ``timing`` / ``gauge`` methods
can be passed as ``AdfifyConfig(metrics=...)`` to route them to StatsD,
Prometheus, Datadog and so on.

Emitted metric names:

* ``adfify.conversions_total``       -- counter
* ``adfify.conversion_duration_ms``  -- timing
* ``adfify.nodes_emitted_total``     -- counter (top-level nodes)
* ``adfify.tokens_dropped_total``    -- counter (unrecognised tokens)
* ``adfify.lists_hoisted_total``     -- counter (lists moved out of task lists)
* ``adfify.max_nesting_depth``       -- gauge (deepest list/quote nesting of the last conversion)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* are string key/value pairs; backends translate them into
    whatever labelling scheme they support.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment the counter *name* by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
