"""
Runtime configuration for JSON fragment authoring.

This module centralizes the environment-driven switches that shape how
declared fragment values are rendered into JSON text and how rendering
defects are reported.

Configuration is read-only at runtime. Fixtures built under the same
configuration always serialize to identical text.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class FragmentConfig(BaseModel):
    """
    Runtime configuration for fragment serialization and composition.
    """

    # ------------------------------------------------------------------
    # Value serialization
    # ------------------------------------------------------------------

    ESCAPE_STRINGS: bool = Field(
        False,
        description=(
            "Escape string values as proper JSON strings. "
            "When false, strings are emitted verbatim between double "
            "quotes and callers must supply pre-escaped text."
        ),
    )

    STRICT_VALUE_TYPES: bool = Field(
        False,
        description=(
            "Raise UnsupportedValueError for values that cannot be "
            "serialized instead of logging and skipping them"
        ),
    )

    UNSUPPORTED_VALUE_LOG_LEVEL: str = Field(
        "WARNING",
        description="Log level used when an unsupported value is skipped",
    )

    # ------------------------------------------------------------------
    # Enclosures
    # ------------------------------------------------------------------

    PAD_ENCLOSURES: bool = Field(
        True,
        description="Emit '{ value }' instead of '{value}' when wrapping fragments",
    )

    # ------------------------------------------------------------------
    # Validators (Pydantic v2)
    # ------------------------------------------------------------------

    @field_validator("UNSUPPORTED_VALUE_LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Unsupported UNSUPPORTED_VALUE_LOG_LEVEL '{v}'. "
                f"Allowed values: {sorted(_LOG_LEVELS)}"
            )
        return level

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "FragmentConfig":
        """
        Load configuration from environment variables.
        """

        def env_bool(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if raw is None:
                return default
            return raw.lower() in {"1", "true", "yes", "on"}

        return cls(
            ESCAPE_STRINGS=env_bool(
                "JSONFRAGMENT_ESCAPE_STRINGS", False
            ),
            STRICT_VALUE_TYPES=env_bool(
                "JSONFRAGMENT_STRICT_VALUE_TYPES", False
            ),
            UNSUPPORTED_VALUE_LOG_LEVEL=os.getenv(
                "JSONFRAGMENT_UNSUPPORTED_VALUE_LOG_LEVEL", "WARNING"
            ),
            PAD_ENCLOSURES=env_bool(
                "JSONFRAGMENT_PAD_ENCLOSURES", True
            ),
        )

    model_config = {
        "frozen": True,
    }


@lru_cache(maxsize=1)
def get_config() -> FragmentConfig:
    """Process-wide configuration, read from the environment once."""
    return FragmentConfig.from_env()
