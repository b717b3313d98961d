"""
Enclosing fragments into standalone JSON.

The composer adds the accolades or square brackets a fragment lacks. The
wrapped fragment is kept as the only child so the comparator still reaches
every value declared underneath it.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple, Union

from jsonfragment.app.config import FragmentConfig, get_config
from jsonfragment.app.fragments.base import ContainerFragment, Fragment
from jsonfragment.app.fragments.composition import combine


class Enclosure(str, Enum):
    OBJECT = "object"
    ARRAY = "array"

    @property
    def delimiters(self) -> Tuple[str, str]:
        if self is Enclosure.OBJECT:
            return "{", "}"
        return "[", "]"

    def wrap(self, text: str, *, padded: bool = True) -> str:
        opening, closing = self.delimiters
        if padded:
            return f"{opening} {text} {closing}"
        return f"{opening}{text}{closing}"


class ComposedFragment(ContainerFragment):
    """
    Enclosed fragment. Its text is a complete JSON document.
    """

    __slots__ = ("_text", "_fragment", "_enclosing")

    def __init__(self, text: str, fragment: Fragment, enclosing: Enclosure) -> None:
        self._text = text
        self._fragment = fragment
        self._enclosing = enclosing

    @property
    def text(self) -> str:
        return self._text

    @property
    def children(self) -> Tuple[Fragment, ...]:
        return (self._fragment,)

    @property
    def enclosing(self) -> Enclosure:
        return self._enclosing


FragmentSource = Union[Fragment, Sequence[Fragment]]


class FragmentComposer:
    """
    Wrap one fragment, or a list of fragments, in an enclosure.
    """

    def __init__(self, *, config: FragmentConfig | None = None) -> None:
        self._config = config or get_config()

    def compose(self, source: FragmentSource, enclosing: Enclosure) -> ComposedFragment:
        # A list is first bound into a single fragment.
        fragment = source if isinstance(source, Fragment) else combine(source)
        text = enclosing.wrap(fragment.text, padded=self._config.PAD_ENCLOSURES)
        return ComposedFragment(text, fragment, enclosing)

    def as_object(self, source: FragmentSource) -> ComposedFragment:
        return self.compose(source, Enclosure.OBJECT)

    def as_array(self, source: FragmentSource) -> ComposedFragment:
        return self.compose(source, Enclosure.ARRAY)


def to_json(source: FragmentSource, *, config: FragmentConfig | None = None) -> ComposedFragment:
    """Bind the fragments and wrap them into a JSON object."""
    return FragmentComposer(config=config).as_object(source)


def to_json_array(source: FragmentSource, *, config: FragmentConfig | None = None) -> ComposedFragment:
    """
    Bind the fragments and wrap them into a JSON array.

    Each fragment is expected to already be a valid JSON value.
    """
    return FragmentComposer(config=config).as_array(source)
