"""
JSON fragment authoring engine.

Fragments describe pieces of hand-built JSON, compose into complete
documents, and re-validate every declared value against the model decoded
from that JSON.
"""

from .base import ContainerFragment, Fragment
from .comparison import compare, expect_equal, iter_fragments
from .composer import ComposedFragment, Enclosure, FragmentComposer, to_json, to_json_array
from .composition import by_adding, combine
from .errors import (
    FixtureDefectError,
    FragmentError,
    FragmentMismatchError,
    UnsupportedValueError,
)
from .model_fragment import ModelFragment
from .plain import EMPTY, NULL, PlainFragment
from .values import FragmentValue, ValueSerializer, key_name

__all__ = [
    "Fragment",
    "ContainerFragment",
    "PlainFragment",
    "EMPTY",
    "NULL",
    "ModelFragment",
    "ComposedFragment",
    "Enclosure",
    "FragmentComposer",
    "to_json",
    "to_json_array",
    "by_adding",
    "combine",
    "compare",
    "iter_fragments",
    "expect_equal",
    "FragmentValue",
    "ValueSerializer",
    "key_name",
    "FragmentError",
    "FragmentMismatchError",
    "FixtureDefectError",
    "UnsupportedValueError",
]
