"""Deep equality of arbitrary values, safe on cyclic structures."""

from __future__ import annotations

import dataclasses
import inspect
import types
from typing import Any

_SCALARS = (bool, int, float, complex, str, bytes, bytearray, set, frozenset)


def _is_record(v: Any) -> bool:
    if isinstance(v, (type, types.ModuleType)) or inspect.isroutine(v):
        return False
    return dataclasses.is_dataclass(v) or hasattr(v, "__dict__")


def _members(v: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(v):
        return {f.name: getattr(v, f.name) for f in dataclasses.fields(v)}
    return vars(v)


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is y:
        return True
    if type(x) is not type(y):
        return False
    if isinstance(x, _SCALARS):
        return x == y
    if inspect.isroutine(x):
        return False

    container = isinstance(x, (list, tuple, dict)) or _is_record(x)
    if container:
        key = (id(x), id(y))
        if key in seen:
            return True
        seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        return len(x) == len(y) and all(
            k in y and _equal(v, y[k], seen) for k, v in x.items()
        )
    if container:
        mx, my = _members(x), _members(y)
        return mx.keys() == my.keys() and all(_equal(mx[k], my[k], seen) for k in mx)
    return x == y


def equal(x: Any, y: Any) -> bool:
    """Report whether ``x`` and ``y`` are deeply equal.

    Values of different types are never equal. Functions are equal only to
    themselves. Dictionary keys are compared with ``==``, not deeply.
    """
    return _equal(x, y, set())