"""
Rendering of declared key/value pairs into a JSON object body.

The serializer produces comma-joined `"key": value` pairs with no enclosing
accolades. Absent values are skipped entirely, nested fragments are emitted
verbatim, and unsupported values are reported and dropped so that fixtures
describing malformed input still build.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Collection, Iterable, Mapping, Optional, Union

from jsonfragment.app.config import FragmentConfig, get_config
from jsonfragment.app.fragments.base import Fragment
from jsonfragment.app.fragments.errors import UnsupportedValueError

logger = logging.getLogger(__name__)


# Closed set of values a fragment may declare. None means "absent".
FragmentValue = Union[bool, int, float, str, Enum, Fragment, None]

FragmentKey = Union[Enum, str]


def key_name(key: FragmentKey) -> str:
    """JSON member name for a declared key."""
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class ValueSerializer:
    """
    Serialize declared values into a JSON object-body fragment.
    """

    def __init__(self, config: FragmentConfig | None = None) -> None:
        self._config = config or get_config()

    @property
    def config(self) -> FragmentConfig:
        return self._config

    def serialize(
        self,
        values: Mapping[FragmentKey, Any],
        *,
        include: Optional[Iterable[FragmentKey]] = None,
    ) -> str:
        """
        Render `values` in mapping order.

        When `include` is given, only those keys are rendered.
        """
        included: Optional[Collection[FragmentKey]] = (
            set(include) if include is not None else None
        )

        parts: list[str] = []
        for key, value in values.items():
            if included is not None and key not in included:
                continue
            if value is None:
                continue

            rendered = self.render_value(key, value)
            if rendered is None:
                continue

            parts.append(f'"{key_name(key)}": {rendered}')

        return ", ".join(parts)

    def render_value(self, key: FragmentKey, value: Any) -> Optional[str]:
        """
        JSON text for a single value, or None if it was skipped.
        """
        if isinstance(value, Fragment):
            return value.text

        if isinstance(value, Enum):
            return self.render_value(key, value.value)

        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return "true" if value else "false"

        if isinstance(value, (int, float)):
            try:
                return json.dumps(value, allow_nan=False)
            except ValueError:
                # NaN and infinities have no JSON spelling
                return self._unsupported(key, value)

        if isinstance(value, str):
            if self._config.ESCAPE_STRINGS:
                return json.dumps(value, ensure_ascii=False)
            return f'"{value}"'

        return self._unsupported(key, value)

    def _unsupported(self, key: FragmentKey, value: Any) -> None:
        name = key_name(key)
        if self._config.STRICT_VALUE_TYPES:
            raise UnsupportedValueError(name, value)

        logger.log(
            getattr(logging, self._config.UNSUPPORTED_VALUE_LOG_LEVEL),
            "Ignoring unsupported fragment value for key '%s': %r (%s)",
            name,
            value,
            type(value).__name__,
        )
        return None
