"""
Comma-joined composition of fragments.

Composition never mutates its operands. Order of composition is the order
of members in the resulting text.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable

from jsonfragment.app.fragments.base import Fragment
from jsonfragment.app.fragments.plain import EMPTY, PlainFragment


def by_adding(base: Fragment, other: Fragment) -> Fragment:
    """
    Append `other` to `base`, separated by a comma.

    The result is a plain container: `base`'s own rule is not carried over,
    only its children. Join model fragments through `combine` (or a list
    passed to `to_json`) to keep every rule in the tree.
    """
    if not other.text:
        return base

    if not base.text:
        return PlainFragment(other.text, (other,))

    return PlainFragment(f"{base.text},{other.text}", (*base.children, other))


def combine(fragments: Iterable[Fragment]) -> Fragment:
    """Left fold of `fragments` with `by_adding`, starting from EMPTY."""
    return reduce(by_adding, fragments, EMPTY)
