"""Local identifier generation for ``taskList`` and ``taskItem`` nodes.

The target platform only needs identifiers that are unique within one
document.  Random UUID4 strings satisfy that without any shared state,
so concurrent conversions never need to coordinate.
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable


def generate_local_id() -> str:
    """Return a fresh random UUID4 string.

    Examples
    --------
    >>> len(generate_local_id())
    36
    """
    return str(uuid.uuid4())


def sequential_ids(prefix: str = "local-id") -> Callable[[], str]:
    """Return a deterministic generator yielding ``<prefix>-1``, ``<prefix>-2``, ...

    Useful for reproducible output and for tests that compare whole
    documents.

    Examples
    --------
    >>> next_id = sequential_ids("task")
    >>> next_id(), next_id()
    ('task-1', 'task-2')
    """
    counter = itertools.count(1)

    def _next_id() -> str:
        return f"{prefix}-{next(counter)}"

    return _next_id
