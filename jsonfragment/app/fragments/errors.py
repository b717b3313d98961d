"""
Error taxonomy for fragment authoring and comparison.

Two comparison failures are kept apart on purpose:
- FragmentMismatchError: the decoded model disagrees with a declared value
  (a defect in the system under test)
- FixtureDefectError: a comparison rule cannot interpret its own declared
  value (a defect in the fixture)
"""

from __future__ import annotations

from typing import Any


class FragmentError(Exception):
    """Base class for all fragment errors."""


class UnsupportedValueError(FragmentError, TypeError):
    """
    A declared value has a type the serializer cannot render.

    Only raised when STRICT_VALUE_TYPES is enabled.
    """

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Unsupported value for key '{key}': "
            f"{value!r} ({type(value).__name__})"
        )


class FragmentMismatchError(FragmentError, AssertionError):
    """A decoded model field does not match the declared reference value."""

    def __init__(self, field: str, expected: Any, actual: Any) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{field}: expected {expected!r}, got {actual!r}"
        )


class FixtureDefectError(FragmentError):
    """
    A comparison rule cannot interpret a value it declared itself.

    Signals a broken fixture, not a broken decoder. Update the fixture.
    """
