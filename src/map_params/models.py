"""Schemaless argument model.

Job arguments usually arrive as decoded JSON or YAML, so values are not
validated up front. `Args` is a plain mapping alias; `kind_of` sorts a single
dynamic value into the closed set of kinds the typed accessors understand.
"""
from enum import Enum
import numbers
from typing import Any, Mapping

# Args is a schemaless mapping of keys to decoded values
Args = Mapping[str, Any]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1


class ValueKind(Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """Classify `value`; integers are split by which 64-bit range holds them."""
    if isinstance(value, str):
        return ValueKind.STRING
    # bool subclasses int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOL
    # numbers.Integral also admits numpy and other fixed-width integers
    if isinstance(value, numbers.Integral):
        n = int(value)
        if INT64_MIN <= n <= INT64_MAX:
            return ValueKind.INT
        if INT64_MAX < n <= UINT64_MAX:
            return ValueKind.UINT
        return ValueKind.OTHER
    if isinstance(value, float):
        return ValueKind.FLOAT
    return ValueKind.OTHER
