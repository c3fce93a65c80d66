"""Filling dataclass fields from HTTP request parameters."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import re
import typing
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Mapping, Sequence
from urllib.parse import parse_qs, urlsplit

from .servers import _quote

ADDRESS = ("", 12345)

_log = logging.getLogger(__name__)

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_INTEGER = re.compile(r"[+-]?[0-9]+")

_NAMED_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "bool": bool,
    "float": float,
    "list[str]": list[str],
    "list[int]": list[int],
    "list[bool]": list[bool],
    "list[float]": list[float],
    "List[str]": list[str],
    "List[int]": list[int],
    "List[bool]": list[bool],
}


class ParamError(ValueError):
    """A request parameter could not be stored in its field."""


@dataclass
class SearchParams:
    """Parameters of the search endpoint."""

    labels: list[str] = field(default_factory=list, metadata={"http": "l"})
    max_results: int = field(default=10, metadata={"http": "max"})
    exact: bool = field(default=False, metadata={"http": "x"})

    def __str__(self) -> str:
        labels = " ".join(self.labels)
        exact = "true" if self.exact else "false"
        return f"{{Labels:[{labels}] MaxResults:{self.max_results} Exact:{exact}}}"


def _parse_int(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise ParamError(f"strconv.ParseInt: parsing {_quote(value)}: invalid syntax")
    number = int(value)
    if not -(1 << 63) <= number < 1 << 63:
        raise ParamError(f"strconv.ParseInt: parsing {_quote(value)}: value out of range")
    return number


def _parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ParamError(f"strconv.ParseBool: parsing {_quote(value)}: invalid syntax")


def _convert(tp: Any, value: str) -> Any:
    if tp is str:
        return value
    if tp is bool:
        return _parse_bool(value)
    if tp is int:
        return _parse_int(value)
    raise ParamError(f"unsupported kind {getattr(tp, '__name__', tp)}")


def _field_type(f: dataclasses.Field) -> Any:
    tp = f.type
    if isinstance(tp, str):
        return _NAMED_TYPES.get(tp.replace(" ", ""), tp)
    return tp


def _effective_name(f: dataclasses.Field) -> str:
    return f.metadata.get("http") or f.name.replace("_", "").lower()


def unpack(form: Mapping[str, Sequence[str]] | str, target: Any) -> None:
    """Set the fields of the dataclass instance ``target`` from request parameters.

    ``form`` maps each parameter to its values, or is a query string. A field
    is named by its ``http`` metadata, or else by its name lower-cased with
    underscores removed. List fields collect every value; other fields keep
    the last. Unknown parameters are ignored.
    """
    if isinstance(form, str):
        form = parse_qs(form, keep_blank_values=True)
    if not dataclasses.is_dataclass(target) or isinstance(target, type):
        raise TypeError("target must be a dataclass instance")
    fields = {_effective_name(f): f for f in dataclasses.fields(target)}
    for name, values in form.items():
        f = fields.get(name)
        if f is None:
            continue
        tp = _field_type(f)
        for value in values:
            try:
                if typing.get_origin(tp) is list:
                    (elem,) = typing.get_args(tp) or (str,)
                    getattr(target, f.name).append(_convert(elem, value))
                else:
                    setattr(target, f.name, _convert(tp, value))
            except ParamError as err:
                raise ParamError(f"{name}: {err}") from err


def search(query: str) -> tuple[HTTPStatus, str]:
    """Handle a search request with the given query string; return status and body."""
    data = SearchParams()
    try:
        unpack(query, data)
    except ParamError as err:
        return HTTPStatus.BAD_REQUEST, f"{err}\n"
    return HTTPStatus.OK, f"Search: {data}\n"


class _SearchHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        parts = urlsplit(self.path)
        if parts.path == "/search":
            status, text = search(parts.query)
        else:
            status, text = HTTPStatus.NOT_FOUND, "404 page not found\n"
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)


def main(argv: list[str] | None = None) -> int:
    """Serve the search endpoint on port 12345 until interrupted."""
    argparse.ArgumentParser(prog="search", description="Serve /search.").parse_args(argv)
    with ThreadingHTTPServer(ADDRESS, _SearchHandler) as server:
        server.serve_forever()
    return 0