"""Predicate Registry — tests for the immutable category → predicate table.

Tests cover:
    - PREDICATES has one entry per TypeCategory, in declaration order, read-only
    - get_predicate accepts enum members and loose strings, rejects unknown names
    - classify agrees with the individual predicates
"""

import math

import pytest

from kindguard.core.domain_types import BigInt, Symbol, TypeCategory, Undefined
from kindguard.core.errors import UnknownPredicateError
from kindguard.core.predicate_registry import (
    PREDICATES, classify, get_predicate, normalize_name, resolve_category,
)
from kindguard.core.predicates import is_array, is_not_a_number, is_record


# ─── PREDICATES ──────────────────────────────────────────────────

def test_predicates_cover_every_category_in_order():
    assert list(PREDICATES) == list(TypeCategory)


def test_predicates_table_is_read_only():
    with pytest.raises(TypeError):
        PREDICATES[TypeCategory.ARRAY] = lambda value: True  # type: ignore[index]
    assert get_predicate("array")([1, 2, 3])


# ─── get_predicate ───────────────────────────────────────────────

def test_get_predicate_by_enum_member():
    assert get_predicate(TypeCategory.ARRAY) is is_array


def test_get_predicate_by_loose_string():
    assert get_predicate("  Record ") is is_record
    assert get_predicate("NOT_A_NUMBER") is is_not_a_number


def test_get_predicate_unknown_name_raises():
    with pytest.raises(UnknownPredicateError) as exc_info:
        get_predicate("isNaN")
    assert exc_info.value.name == "isnan"
    assert exc_info.value.code == "UNKNOWN_PREDICATE"


def test_normalize_name_keeps_enum_value():
    assert normalize_name(TypeCategory.WEAK_MAP) == "weak_map"


def test_resolve_category_round_trips_values():
    for category in TypeCategory:
        assert resolve_category(category.value) is category


# ─── classify ────────────────────────────────────────────────────

def test_classify_none():
    assert classify(None) == [TypeCategory.NONE, TypeCategory.NULL]


def test_classify_undefined():
    assert classify(Undefined) == [TypeCategory.NONE, TypeCategory.UNDEFINED]


def test_classify_empty_list():
    assert classify([]) == [
        TypeCategory.ARRAY, TypeCategory.NOT_NONE, TypeCategory.OBJECT,
    ]


def test_classify_dict_is_map_and_record():
    assert classify({}) == [
        TypeCategory.MAP, TypeCategory.NOT_NONE,
        TypeCategory.OBJECT, TypeCategory.RECORD,
    ]


def test_classify_nan():
    assert classify(math.nan) == [
        TypeCategory.NOT_A_NUMBER, TypeCategory.NOT_NONE, TypeCategory.NUMBER,
    ]


def test_classify_int_is_number_not_bigint():
    assert classify(42) == [TypeCategory.NOT_NONE, TypeCategory.NUMBER]


def test_classify_bigint_is_not_number():
    assert classify(BigInt(0)) == [TypeCategory.BIGINT, TypeCategory.NOT_NONE]


def test_classify_symbol():
    assert classify(Symbol()) == [TypeCategory.NOT_NONE, TypeCategory.SYMBOL]


def test_classify_agrees_with_each_predicate():
    for value in (0, 1.5, "", True, [1], {1}, {"a": 1}, None, Undefined):
        expected = [c for c, predicate in PREDICATES.items() if predicate(value)]
        assert classify(value) == expected
