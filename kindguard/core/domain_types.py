"""Domain Types — category names and the host values Python lacks natively.

Invariants:
    - TypeCategory has exactly one member per predicate, in public declaration order
    - Undefined is a process-wide singleton, distinct from None
    - Symbol instances are equal only to themselves and are never str
    - BigInt is an int subclass: plain ints are numbers, only BigInt values are bigints

Design Decisions:
    - Undefined reuses pydantic-core's PydanticUndefined: pydantic already marks
      declared-but-unassigned fields with it, so no second sentinel competes (ADR: one absence marker per meaning)
    - str Enum for categories: serialize to JSON and compare to plain strings without custom encoders
"""

from dataclasses import dataclass
from enum import Enum

from pydantic_core import PydanticUndefined, PydanticUndefinedType


# ─── Absence Markers ─────────────────────────────────────────────

Undefined = PydanticUndefined
UndefinedType = PydanticUndefinedType


# ─── Symbol ──────────────────────────────────────────────────────

@dataclass(frozen=True, eq=False)
class Symbol:
    """Unique identifier token — identity equality, optional description."""
    description: str | None = None

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"


# ─── BigInt ──────────────────────────────────────────────────────

class BigInt(int):
    """Explicitly arbitrary-precision integer, kept apart from ordinary numbers.

    Arithmetic results are plain ints: wrap again to keep the category.
    """
    __slots__ = ()

    def __repr__(self) -> str:
        return f"BigInt({int(self)})"


# ─── Enums ───────────────────────────────────────────────────────

class TypeCategory(str, Enum):
    """Recognized type categories — one per predicate."""
    ARRAY = "array"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DATE = "date"
    ERROR = "error"
    FUNCTION = "function"
    MAP = "map"
    NOT_A_NUMBER = "not_a_number"
    NONE = "none"
    NOT_NONE = "not_none"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    PROMISE = "promise"
    RECORD = "record"
    REGEXP = "regexp"
    SET = "set"
    STRING = "string"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    WEAK_MAP = "weak_map"
    WEAK_SET = "weak_set"
