"""
Decoder capability consumed by fragment comparison.

A decoder turns the UTF-8 bytes of a composed fragment into a model. It may
fail; failures are never caught here, since a decode failure is often
exactly what a negative test expects.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter

from jsonfragment.app.fragments.base import Fragment
from jsonfragment.app.fragments.comparison import compare

logger = logging.getLogger(__name__)

M = TypeVar("M")
M_co = TypeVar("M_co", covariant=True)


class FragmentDecoder(Protocol[M_co]):
    """
    Interface for decoding JSON bytes into a model.
    """

    def decode(self, data: bytes) -> M_co:
        ...


class PydanticDecoder(Generic[M]):
    """
    Decoder backed by pydantic validation.

    `target` is anything pydantic can validate: a BaseModel subclass,
    `list[Model]`, a dataclass, etc.
    """

    def __init__(self, target: Any) -> None:
        self._adapter: TypeAdapter[M] = TypeAdapter(target)

    def decode(self, data: bytes) -> M:
        return self._adapter.validate_json(data)


def decode_and_compare(fragment: Fragment, decoder: FragmentDecoder[M]) -> M:
    """
    Decode `fragment.data` and compare the fragment tree against the result.

    Returns the decoded model.
    """
    model = decoder.decode(fragment.data)
    logger.debug("Decoded %s from %d byte(s)", type(model).__name__, len(fragment.data))
    compare(fragment, model)
    return model
