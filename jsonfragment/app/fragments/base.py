"""
Fragment capability.

A fragment is an immutable node holding a piece of JSON text without its
enclosing accolades or square brackets, the fragments it was composed from,
and a comparison rule against a decoded model.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Tuple

if TYPE_CHECKING:
    from jsonfragment.app.config import FragmentConfig
    from jsonfragment.app.fragments.composer import ComposedFragment


class Fragment(ABC):
    """
    Abstract JSON fragment.

    IMPORTANT:
    - Fragments are immutable value objects
    - Composition always returns a new fragment
    - `compare_current_fragment` checks this node only; use `compare`
      to walk the whole tree
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    # Required capability
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def text(self) -> str:
        """Serialized JSON fragment."""

    @property
    @abstractmethod
    def children(self) -> Tuple["Fragment", ...]:
        """Fragments this one was composed from, in composition order."""

    @abstractmethod
    def compare_current_fragment(self, model: Any) -> None:
        """
        Compare the model against the values that configured this fragment.

        Does not recurse into `children`.
        """

    # ------------------------------------------------------------------
    # Derived behavior
    # ------------------------------------------------------------------

    @property
    def data(self) -> bytes:
        """UTF-8 representation of `text`."""
        return self.text.encode("utf-8")

    def by_adding(self, other: "Fragment") -> "Fragment":
        from jsonfragment.app.fragments.composition import by_adding

        return by_adding(self, other)

    def to_json(self, *, config: "FragmentConfig | None" = None) -> "ComposedFragment":
        """Wrap this fragment into a standalone JSON object."""
        from jsonfragment.app.fragments.composer import FragmentComposer, Enclosure

        return FragmentComposer(config=config).compose(self, Enclosure.OBJECT)

    def to_json_array(self, *, config: "FragmentConfig | None" = None) -> "ComposedFragment":
        """Wrap this fragment into a standalone JSON array."""
        from jsonfragment.app.fragments.composer import FragmentComposer, Enclosure

        return FragmentComposer(config=config).compose(self, Enclosure.ARRAY)

    def compare(self, model: Any) -> int:
        """
        Compare this fragment and, recursively, all of its children
        against `model`. Returns the number of visited fragments.
        """
        from jsonfragment.app.fragments.comparison import compare

        return compare(self, model)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(text={self.text!r}, "
            f"children={len(self.children)})"
        )


class ContainerFragment(Fragment):
    """
    Fragment that only binds other fragments together.

    Containers declare no values of their own, so their comparison rule
    is a no-op. Field-keyed fragments must never inherit from this.
    """

    __slots__ = ()

    def compare_current_fragment(self, model: Any) -> None:
        return
