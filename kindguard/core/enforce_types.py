"""Type Enforcement — fail-loudly and error-dict wrappers around the predicates.

Invariants:
    - check_type and describe_type are PURE and never raise for any value
    - ensure_type returns its argument unchanged (same object) when the predicate holds
    - Unknown category names raise UnknownPredicateError from every helper

Design Decisions:
    - check_type returns an error dict (not an exception), mirroring the rule checks
      that feed tool-style JSON results; ensure_type is the raising counterpart
    - "actual" is the full classify() result so messages say what the value IS,
      not only what it is not
"""

from typing import TypeVar

from kindguard.core.domain_types import TypeCategory
from kindguard.core.errors import TypeNarrowingError
from kindguard.core.predicate_registry import classify, get_predicate, resolve_category

T = TypeVar("T")


def describe_type(value: object) -> str:
    """Categories the value belongs to, joined with '|' (e.g. 'array|not_none|object')."""
    return "|".join(category.value for category in classify(value))


def check_type(value: object, category: TypeCategory | str) -> dict | None:
    """None when value satisfies category, else a TYPE_MISMATCH error dict."""
    expected = resolve_category(category)
    if get_predicate(expected)(value):
        return None
    actual = describe_type(value)
    return {
        "status": "error",
        "error_code": "TYPE_MISMATCH",
        "message": f"ERROR: Expected a value of type '{expected.value}', got '{actual}'.",
        "expected": expected.value,
        "actual": actual,
    }


def ensure_type(value: T, category: TypeCategory | str) -> T:
    expected = resolve_category(category)
    if not get_predicate(expected)(value):
        raise TypeNarrowingError(expected.value, describe_type(value))
    return value
