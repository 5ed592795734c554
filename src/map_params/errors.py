"""Errors recorded by typed lookups.

They are ordinary exception instances so callers may raise them after polling
`MapParams.error()`, but the accessors themselves only return them.
"""
from typing import Any


class MapParamsError(Exception):
    """Base class for lookup failures on a single key."""

    def __init__(self, message: str, json_type: str, key: str):
        self.json_type = json_type
        self.key = key
        super().__init__(message)


class MissingKeyError(MapParamsError):
    def __init__(self, json_type: str, key: str, label: str):
        message = f"looking for a {json_type} in {label}[{key}] but key wasn't found"
        super().__init__(message, json_type, key)


class TypeMismatchError(MapParamsError):
    """The key exists but its value can't be read as `json_type`."""

    def __init__(self, json_type: str, key: str, value: Any, label: str):
        self.value = value
        self.actual_type = type(value).__name__
        message = (
            f"looking for a {json_type} in {label}[{key}] "
            f"but value wasn't right type: {self.actual_type}({value})"
        )
        super().__init__(message, json_type, key)

    def __repr__(self) -> str:
        return f"TypeMismatchError({str(self)!r}, value={self.value!r})"
