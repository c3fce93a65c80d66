"""Listing the methods of a value."""

from __future__ import annotations

import inspect
import sys
from typing import Any, TextIO


def _code_signature(member: Any) -> str | None:
    func = getattr(member, "__func__", member)
    code = getattr(func, "__code__", None)
    if code is None:
        return None
    names = code.co_varnames
    positional = list(names[: code.co_argcount])
    kwonly = list(names[code.co_argcount : code.co_argcount + code.co_kwonlyargcount])
    rest = code.co_argcount + code.co_kwonlyargcount
    defaults = getattr(func, "__defaults__", None) or ()
    kwdefaults = getattr(func, "__kwdefaults__", None) or {}

    params = []
    first_default = len(positional) - len(defaults)
    for i, name in enumerate(positional):
        if i >= first_default:
            params.append(f"{name}={defaults[i - first_default]!r}")
        else:
            params.append(name)
    if hasattr(member, "__self__") and params:
        params.pop(0)
    if code.co_flags & inspect.CO_VARARGS:
        params.append("*" + names[rest])
        rest += 1
    elif kwonly:
        params.append("*")
    for name in kwonly:
        params.append(f"{name}={kwdefaults[name]!r}" if name in kwdefaults else name)
    if code.co_flags & inspect.CO_VARKEYWORDS:
        params.append("**" + names[rest])
    return "(" + ", ".join(params) + ")"


def _text_signature(member: Any) -> str | None:
    text = getattr(member, "__text_signature__", None)
    if not text or not (text.startswith("(") and text.endswith(")")):
        return None
    params = [p.strip() for p in text[1:-1].split(",") if p.strip()]
    params = [p for p in params if not p.startswith("$")]
    if params and params[0] == "/":
        params.pop(0)
    return "(" + ", ".join(params) + ")"


def _signature(member: Any) -> str:
    return _code_signature(member) or _text_signature(member) or "(...)"


def method_lines(x: Any) -> list[str]:
    """Return a ``type`` line for ``x`` and a ``func`` line per public method, sorted by name."""
    t = type(x)
    name = t.__qualname__
    lines = [f"type {name}"]
    for attr in sorted(dir(t)):
        if attr.startswith("_"):
            continue
        if not inspect.isroutine(inspect.getattr_static(t, attr)):
            continue
        lines.append(f"func ({name}) {attr}{_signature(getattr(x, attr))}")
    return lines


def print_methods(x: Any, out: TextIO | None = None) -> None:
    """Write the method set of ``x`` to ``out``."""
    out = sys.stdout if out is None else out
    out.write("".join(line + "\n" for line in method_lines(x)))