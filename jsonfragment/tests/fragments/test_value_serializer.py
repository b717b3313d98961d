import json
import logging
import math

import pytest

from jsonfragment.app.config import FragmentConfig
from jsonfragment.app.fragments import (
    NULL,
    PlainFragment,
    UnsupportedValueError,
    ValueSerializer,
)
from jsonfragment.tests.fixtures.fragments import PokemonKeys
from jsonfragment.tests.fixtures.models import PokemonType


def _serializer(**overrides) -> ValueSerializer:
    return ValueSerializer(FragmentConfig(**overrides))


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def test_absent_values_are_skipped_not_nulled():
    text = _serializer().serialize({"a": 1, "b": None, "c": 2})

    assert text == '"a": 1, "c": 2'
    assert "null" not in text


def test_numbers_and_booleans_use_canonical_json_text():
    text = _serializer().serialize(
        {"int": 6, "float": 90.5, "yes": True, "no": False}
    )

    assert text == '"int": 6, "float": 90.5, "yes": true, "no": false'


def test_strings_are_quoted_verbatim_by_default():
    text = _serializer().serialize({"quote": 'say "hi"'})

    assert text == '"quote": "say "hi""'


def test_strings_are_escaped_when_enabled():
    text = _serializer(ESCAPE_STRINGS=True).serialize({"quote": 'say "hi"\n'})

    assert text == '"quote": "say \\"hi\\"\\n"'


def test_enum_keys_and_values_use_their_raw_values():
    text = _serializer().serialize(
        {PokemonKeys.BASE_TYPE: PokemonType.WATER}
    )

    assert text == '"baseType": "water"'


# ---------------------------------------------------------------------------
# Nested fragments
# ---------------------------------------------------------------------------

def test_nested_fragment_is_emitted_verbatim():
    nested = PlainFragment('{ "x": 1 }')

    text = _serializer().serialize({"nested": nested})

    assert text == '"nested": { "x": 1 }'


def test_null_constant_declares_explicit_null():
    assert _serializer().serialize({"weightKg": NULL}) == '"weightKg": null'


# ---------------------------------------------------------------------------
# Ordering and subsets
# ---------------------------------------------------------------------------

def test_entries_follow_mapping_order():
    text = _serializer().serialize({"z": 1, "a": 2, "m": 3})

    assert text == '"z": 1, "a": 2, "m": 3'


def test_include_restricts_serialized_keys():
    values = {"a": 1, "b": 2, "c": 3}

    assert _serializer().serialize(values, include={"c", "a"}) == '"a": 1, "c": 3'
    assert _serializer().serialize(values, include=[]) == ""


def test_empty_mapping_serializes_to_empty_text():
    assert _serializer().serialize({}) == ""


# ---------------------------------------------------------------------------
# Unsupported values
# ---------------------------------------------------------------------------

def test_unsupported_value_is_logged_and_skipped(caplog):
    caplog.set_level(logging.WARNING, logger="jsonfragment.app.fragments.values")

    text = _serializer().serialize({"a": 1, "b": [1, 2], "c": True})

    assert text == '"a": 1, "c": true'
    assert any(
        r.levelno == logging.WARNING and "'b'" in r.getMessage()
        for r in caplog.records
    )


def test_unsupported_value_log_level_is_configurable(caplog):
    caplog.set_level(logging.DEBUG, logger="jsonfragment.app.fragments.values")

    _serializer(UNSUPPORTED_VALUE_LOG_LEVEL="error").serialize({"b": object()})

    assert [r.levelno for r in caplog.records] == [logging.ERROR]


def test_strict_mode_raises_for_unsupported_value():
    with pytest.raises(UnsupportedValueError) as exc_info:
        _serializer(STRICT_VALUE_TYPES=True).serialize({"b": {"x": 1}})

    assert exc_info.value.key == "b"
    assert isinstance(exc_info.value, TypeError)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_float_is_skipped(value, caplog):
    caplog.set_level(logging.WARNING, logger="jsonfragment.app.fragments.values")

    text = _serializer().serialize({"a": 1, "weight": value})

    assert text == '"a": 1'
    json.loads("{" + text + "}")
    assert any("'weight'" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_strict_mode_raises_for_non_finite_float(value):
    with pytest.raises(UnsupportedValueError) as exc_info:
        _serializer(STRICT_VALUE_TYPES=True).serialize({"weight": value})

    assert exc_info.value.key == "weight"
