"""Type Predicates — one runtime type test per category, with TypeGuard narrowing.

Invariants:
    - All functions are PURE and TOTAL: any input, a bool out, never raises
    - No predicate retains, copies or mutates its argument
    - is_map/is_weak_map and is_set/is_weak_set are mutually exclusive pairs
    - is_not_none(v) == not is_none(v); is_record(v) == is_object(v) and not is_array(v)
    - is_number (int and float, NaN included) and is_bigint (BigInt only) are disjoint

Design Decisions:
    - TypeGuard return types: mypy/pyright narrow the argument in the true branch
      while the runtime value stays a plain bool
    - is_object and is_record return plain bool: "structured, non-callable" has no
      static type to narrow to, so they classify at runtime only
    - Weak containers excluded explicitly: the stdlib registers WeakSet and the weak
      dictionaries with collections.abc, so isinstance alone would overlap
    - Only is_none, is_not_none and is_record compose other predicates (ADR: one fact per check)
"""

import inspect
import math
import re
import weakref
from collections.abc import Awaitable, Callable, Mapping, Set
from datetime import date
from numbers import Number
from typing import Any, TypeGuard, TypeVar

from kindguard.core.domain_types import BigInt, Symbol, Undefined, UndefinedType

T = TypeVar("T")

WEAK_MAP_TYPES = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)

# Values that are neither absent nor structured
_PRIMITIVE_TYPES = (str, bytes, Number, Symbol, UndefinedType)


def is_array(value: object) -> TypeGuard[list[Any] | tuple[Any, ...]]:
    return isinstance(value, (list, tuple))


def is_bigint(value: object) -> TypeGuard[BigInt]:
    return isinstance(value, BigInt)


def is_boolean(value: object) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_date(value: object) -> TypeGuard[date]:
    return isinstance(value, date)


def is_error(value: object) -> TypeGuard[BaseException]:
    return isinstance(value, BaseException)


def is_function(value: object) -> TypeGuard[Callable[..., Any]]:
    """Callability, not synchronicity: async def functions qualify."""
    return callable(value)


def is_map(value: object) -> TypeGuard[Mapping[Any, Any]]:
    return isinstance(value, Mapping) and not isinstance(value, WEAK_MAP_TYPES)


def is_not_a_number(value: object) -> TypeGuard[float]:
    """True only for a float NaN. None, Undefined and 0 are not NaN."""
    return isinstance(value, float) and math.isnan(value)


def is_none(value: object) -> TypeGuard[None | UndefinedType]:
    """Either absence marker: None ("missing") or Undefined ("uninitialized")."""
    return is_undefined(value) or is_null(value)


def is_not_none(value: T | None | UndefinedType) -> TypeGuard[T]:
    return not is_none(value)


def is_null(value: object) -> TypeGuard[None]:
    return value is None


def is_number(value: object) -> TypeGuard[int | float]:
    """Ints and floats, NaN included. bool and BigInt have their own categories."""
    return (
        isinstance(value, (int, float))
        and not isinstance(value, (bool, BigInt))
    )


def is_object(value: object) -> bool:
    """Structured values: lists, dicts, sets, instances.

    False for absence markers, callables, and primitives (text, bytes,
    numbers, booleans, symbols).
    """
    return (
        value is not None
        and not callable(value)
        and not isinstance(value, _PRIMITIVE_TYPES)
    )


def is_promise(value: object) -> TypeGuard[Awaitable[Any]]:
    """Deferred results: coroutines, asyncio futures and tasks, __await__ objects."""
    return inspect.isawaitable(value)


def is_record(value: object) -> bool:
    return is_object(value) and not is_array(value)


def is_regexp(value: object) -> TypeGuard[re.Pattern[Any]]:
    return isinstance(value, re.Pattern)


def is_set(value: object) -> TypeGuard[Set[Any]]:
    return isinstance(value, Set) and not isinstance(value, weakref.WeakSet)


def is_string(value: object) -> TypeGuard[str]:
    return isinstance(value, str)


def is_symbol(value: object) -> TypeGuard[Symbol]:
    return isinstance(value, Symbol)


def is_undefined(value: object) -> TypeGuard[UndefinedType]:
    return value is Undefined


def is_weak_map(
    value: object,
) -> TypeGuard[weakref.WeakKeyDictionary | weakref.WeakValueDictionary]:
    return isinstance(value, WEAK_MAP_TYPES)


def is_weak_set(value: object) -> TypeGuard[weakref.WeakSet[Any]]:
    return isinstance(value, weakref.WeakSet)
