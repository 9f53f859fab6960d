"""Predicate Registry — the immutable TypeCategory → predicate mapping.

Invariants:
    - PREDICATES has exactly one entry per TypeCategory, in declaration order
    - PREDICATES is read-only (MappingProxyType): categories cannot be redefined at runtime
    - classify() is as total as the predicates: never raises, always returns a list

Design Decisions:
    - Explicit table over introspection of the predicates module: no auto-discovery (ADR: ExMA)
    - Name lookup accepts enum members or their string values so callers holding plain
      strings need no enum import
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from kindguard.core.domain_types import TypeCategory
from kindguard.core.errors import UnknownPredicateError
from kindguard.core.predicates import (
    is_array, is_bigint, is_boolean, is_date, is_error, is_function,
    is_map, is_not_a_number, is_none, is_not_none, is_null, is_number,
    is_object, is_promise, is_record, is_regexp, is_set, is_string,
    is_symbol, is_undefined, is_weak_map, is_weak_set,
)

Predicate = Callable[[object], bool]

PREDICATES: Mapping[TypeCategory, Predicate] = MappingProxyType({
    TypeCategory.ARRAY: is_array,
    TypeCategory.BIGINT: is_bigint,
    TypeCategory.BOOLEAN: is_boolean,
    TypeCategory.DATE: is_date,
    TypeCategory.ERROR: is_error,
    TypeCategory.FUNCTION: is_function,
    TypeCategory.MAP: is_map,
    TypeCategory.NOT_A_NUMBER: is_not_a_number,
    TypeCategory.NONE: is_none,
    TypeCategory.NOT_NONE: is_not_none,
    TypeCategory.NULL: is_null,
    TypeCategory.NUMBER: is_number,
    TypeCategory.OBJECT: is_object,
    TypeCategory.PROMISE: is_promise,
    TypeCategory.RECORD: is_record,
    TypeCategory.REGEXP: is_regexp,
    TypeCategory.SET: is_set,
    TypeCategory.STRING: is_string,
    TypeCategory.SYMBOL: is_symbol,
    TypeCategory.UNDEFINED: is_undefined,
    TypeCategory.WEAK_MAP: is_weak_map,
    TypeCategory.WEAK_SET: is_weak_set,
})


def normalize_name(name: TypeCategory | str) -> str:
    """Canonical lookup key: enum value, or stripped lower-cased string."""
    if isinstance(name, TypeCategory):
        return name.value
    return str(name).strip().lower()


def resolve_category(name: TypeCategory | str) -> TypeCategory:
    """Map a name to its TypeCategory. Raises UnknownPredicateError."""
    key = normalize_name(name)
    try:
        return TypeCategory(key)
    except ValueError:
        raise UnknownPredicateError(key) from None


def get_predicate(name: TypeCategory | str) -> Predicate:
    return PREDICATES[resolve_category(name)]


def classify(value: object) -> list[TypeCategory]:
    """Every category whose predicate holds for value, in declaration order."""
    return [
        category for category, predicate in PREDICATES.items()
        if predicate(value)
    ]
