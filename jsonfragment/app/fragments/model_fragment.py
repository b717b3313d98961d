"""
Field-keyed fragments that mirror concrete models.

A ModelFragment keeps the values it was built from ("reference values") so
that they can be compared against the model decoded from its JSON.

Usage: declare an `Enum` of JSON member names, a `model_type`, and the
comparison rule.

    class PokemonKeys(str, Enum):
        NAME = "name"

    class PokemonFragment(ModelFragment[PokemonKeys]):
        model_type = Pokemon

        def __init__(self, *, name: str | None = "Charizard") -> None:
            super().__init__({PokemonKeys.NAME: name})

        def compare_model(self, model: Pokemon) -> None:
            expect_equal(model.name, self.reference(PokemonKeys.NAME), field="name")
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Generic, Iterable, Mapping, Optional, Tuple, TypeVar

from jsonfragment.app.fragments.base import Fragment
from jsonfragment.app.fragments.values import FragmentValue, ValueSerializer

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Enum)


class ModelFragment(Fragment, Generic[K]):
    """
    Fragment whose text is derived from keyed reference values.

    Subclasses MUST:
    - set `model_type` to the model class their rule applies to
    - implement `compare_model`

    Models of any other type are "not applicable": the check succeeds
    without asserting anything, since the fragment may be compared as part
    of an enclosing model's tree.
    """

    model_type: ClassVar[Optional[type]] = None

    # Per-class override; None falls back to the configured default.
    serializer: ClassVar[Optional[ValueSerializer]] = None

    __slots__ = ("_text", "_children", "_reference_values")

    def __init__(
        self,
        reference_values: Mapping[K, FragmentValue],
        *,
        children: Iterable[Fragment] = (),
        text: Optional[str] = None,
    ) -> None:
        if self.model_type is None:
            raise TypeError(
                f"{type(self).__name__} must declare the model_type its "
                "comparison rule applies to."
            )

        self._reference_values: Mapping[K, FragmentValue] = MappingProxyType(
            dict(reference_values)
        )
        self._text = (
            text
            if text is not None
            else self._serializer().serialize(self._reference_values)
        )
        self._children = tuple(children)

    # ------------------------------------------------------------------
    # Fragment implementation
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def children(self) -> Tuple[Fragment, ...]:
        return self._children

    def compare_current_fragment(self, model: Any) -> None:
        if not isinstance(model, self.model_type):
            logger.debug(
                "%s not applicable to %s, skipping",
                type(self).__name__,
                type(model).__name__,
            )
            return

        self.compare_model(model)

    # ------------------------------------------------------------------
    # Reference values
    # ------------------------------------------------------------------

    @property
    def reference_values(self) -> Mapping[K, FragmentValue]:
        """All values used to build `text`, including absent ones."""
        return self._reference_values

    def reference(self, key: K) -> FragmentValue:
        return self._reference_values.get(key)

    def partial_text(self, include: Iterable[K]) -> str:
        """Fragment text restricted to the `include` keys."""
        return self._serializer().serialize(self._reference_values, include=include)

    def _serializer(self) -> ValueSerializer:
        return self.serializer or ValueSerializer()

    # ------------------------------------------------------------------
    # Comparison rule
    # ------------------------------------------------------------------

    @abstractmethod
    def compare_model(self, model: Any) -> None:
        """
        Assert that every meaningful reference value matches `model`.

        `model` is guaranteed to be a `model_type` instance. Raise
        FixtureDefectError when a reference value cannot be interpreted.
        """
