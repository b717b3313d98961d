"""
Recursive comparison of fragment trees against decoded models.

Every fragment in the tree is visited exactly once, parent before
children, siblings in composition order. Each visit runs that fragment's
own rule against the same model.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from jsonfragment.app.fragments.base import Fragment
from jsonfragment.app.fragments.errors import FragmentMismatchError

logger = logging.getLogger(__name__)


def iter_fragments(fragment: Fragment) -> Iterator[Fragment]:
    """Depth-first, pre-order walk of the fragment tree."""
    yield fragment
    for child in fragment.children:
        yield from iter_fragments(child)


def compare(fragment: Fragment, model: Any) -> int:
    """
    Run every comparison rule in the tree against `model`.

    Returns the number of visited fragments. Rule failures propagate.
    """
    visited = 0
    for node in iter_fragments(fragment):
        node.compare_current_fragment(model)
        visited += 1

    logger.debug(
        "Compared %d fragment(s) against %s",
        visited,
        type(model).__name__,
    )
    return visited


def expect_equal(actual: Any, expected: Any, *, field: str) -> None:
    """Raise FragmentMismatchError unless `actual == expected`."""
    if actual != expected:
        raise FragmentMismatchError(field, expected, actual)
