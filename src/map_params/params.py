"""Typed accessors over a schemaless argument mapping.

Two flavours share the same coercion rules:

- `lookup_string`, `lookup_bool`, `lookup_int64` and `lookup_float64` return
  a `(value, error)` pair for a single key.
- `MapParams` wraps a mapping and records the most recent error instead, so a
  caller can read several arguments and check `error()` once:

    params = MapParams(job_args)
    name = params.get_string("name")
    retries = params.get_int64("retries")
    if params.error() is not None:
        ...

Neither flavour raises on a bad or missing key; the zero value for the
requested type is returned alongside the error.
"""
from collections.abc import Mapping
import logging
from typing import Any, Iterator
from . import config
from .errors import MapParamsError, MissingKeyError, TypeMismatchError
from .models import Args, ValueKind, kind_of

LOG = logging.getLogger(__name__)

# Largest magnitude accepted when reading a float as an integer. Kept just
# inside 2**53 rather than the int64 range.
FLOAT_INT_BOUND = 9007199254740892


def lookup_string(args: Args, key: str, label: str | None = None) -> tuple[str, MapParamsError | None]:
    label = label if label is not None else config.ARGS_LABEL
    if key not in args:
        return "", MissingKeyError("string", key, label)
    v = args[key]
    if kind_of(v) is ValueKind.STRING:
        return v, None
    return "", TypeMismatchError("string", key, v, label)


def lookup_bool(args: Args, key: str, label: str | None = None) -> tuple[bool, MapParamsError | None]:
    label = label if label is not None else config.ARGS_LABEL
    if key not in args:
        return False, MissingKeyError("bool", key, label)
    v = args[key]
    if kind_of(v) is ValueKind.BOOL:
        return v, None
    return False, TypeMismatchError("bool", key, v, label)


def lookup_int64(args: Args, key: str, label: str | None = None) -> tuple[int, MapParamsError | None]:
    """Read `key` as a signed 64-bit integer.

    Integers in the signed range pass through. Floats are accepted only when
    they are whole and within +/-FLOAT_INT_BOUND. Unsigned-only integers,
    NaN and infinities are type mismatches.
    """
    label = label if label is not None else config.ARGS_LABEL
    if key not in args:
        return 0, MissingKeyError("int64", key, label)
    v = args[key]
    kind = kind_of(v)
    if kind is ValueKind.INT:
        return int(v), None
    if kind is ValueKind.FLOAT and v.is_integer():
        as_int = int(v)
        if -FLOAT_INT_BOUND <= as_int <= FLOAT_INT_BOUND:
            return as_int, None
    return 0, TypeMismatchError("int64", key, v, label)


def lookup_float64(args: Args, key: str, label: str | None = None) -> tuple[float, MapParamsError | None]:
    """Read `key` as a float; signed and unsigned integers are converted."""
    label = label if label is not None else config.ARGS_LABEL
    if key not in args:
        return 0.0, MissingKeyError("float64", key, label)
    v = args[key]
    kind = kind_of(v)
    if kind in (ValueKind.INT, ValueKind.UINT):
        return float(int(v)), None
    if kind is ValueKind.FLOAT:
        return v, None
    return 0.0, TypeMismatchError("float64", key, v, label)


class MapParams(Mapping):
    """Read-only view over `args` that remembers the last failed lookup.

    The wrapped mapping is neither copied nor modified. Only the most recent
    error is kept, and a successful lookup leaves it in place.
    """

    def __init__(self, args: Args, label: str | None = None):
        self._args = args
        self._label = label
        self._error: MapParamsError | None = None

    def __getitem__(self, key: str) -> Any:
        return self._args[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)

    def __repr__(self) -> str:
        return f"MapParams({self._args!r}, error={self._error!r})"

    def error(self) -> MapParamsError | None:
        """Return the last recorded error (or None) without clearing it."""
        return self._error

    def reset_error(self) -> MapParamsError | None:
        """Clear the recorded error and return it."""
        err, self._error = self._error, None
        return err

    def _record(self, value, err):
        if err is not None:
            self._error = err
            level = logging.WARNING if config.LOG_ERRORS else logging.DEBUG
            LOG.log(level, "%s", err)
        return value

    def get_string(self, key: str) -> str:
        return self._record(*lookup_string(self._args, key, self._label))

    def get_bool(self, key: str) -> bool:
        return self._record(*lookup_bool(self._args, key, self._label))

    def get_int64(self, key: str) -> int:
        return self._record(*lookup_int64(self._args, key, self._label))

    def get_float64(self, key: str) -> float:
        return self._record(*lookup_float64(self._args, key, self._label))
