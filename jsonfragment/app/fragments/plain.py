from __future__ import annotations

from typing import Iterable, Tuple

from jsonfragment.app.fragments.base import ContainerFragment, Fragment
from jsonfragment.app.fragments.values import ValueSerializer


class PlainFragment(ContainerFragment):
    """
    Fragment with a hand-written value.

    The text is expected to be a valid JSON fragment, not a standalone
    JSON document. `children` lists the fragments used to build it.
    """

    __slots__ = ("_text", "_children")

    def __init__(self, text: str = "", children: Iterable[Fragment] = ()) -> None:
        self._text = text
        self._children = tuple(children)

    @classmethod
    def keyed(
        cls,
        key: str,
        value: Fragment,
        *,
        serializer: ValueSerializer | None = None,
    ) -> "PlainFragment":
        """
        Single `"key": value` entry.

        `value` should render to a JSON value: a scalar literal or an
        object/array built with `to_json` / `to_json_array`.
        """
        serializer = serializer or ValueSerializer()
        return cls(serializer.serialize({key: value}), (value,))

    @property
    def text(self) -> str:
        return self._text

    @property
    def children(self) -> Tuple[Fragment, ...]:
        return self._children


# Starting point for composing fragments into JSON.
EMPTY = PlainFragment()

# Explicit JSON null for a declared value.
NULL = PlainFragment("null")
