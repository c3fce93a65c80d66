"""Minimal HTTP servers that echo parts of each request back to the client."""

from __future__ import annotations

import argparse
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Iterable
from urllib.parse import parse_qsl, unquote, urlsplit

ADDRESS = ("localhost", 8000)

_log = logging.getLogger(__name__)

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(s: str) -> str:
    """Quote ``s`` as a double-quoted string with backslash escapes."""
    parts = []
    for char in s:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        else:
            code = ord(char)
            if code < 0x20 or code == 0x7F:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


def _quote_list(values: Iterable[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def _canonical_header(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


class _Server(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address, handler_class) -> None:
        super().__init__(address, handler_class)
        self.count = 0
        self.lock = threading.Lock()


class _PlainTextHandler(BaseHTTPRequestHandler):
    def _reply(self, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _url_path(self) -> str:
        return unquote(urlsplit(self.path).path)

    def log_message(self, format, *args) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)


class EchoHandler(_PlainTextHandler):
    """Echoes the path component of the requested URL."""

    def do_GET(self) -> None:
        self._reply(f"URL.Path = {_quote(self._url_path())}\n")


class CountingHandler(_PlainTextHandler):
    """Echoes the path and counts requests; ``/count`` reports the count."""

    def do_GET(self) -> None:
        server = self.server
        if self._url_path() == "/count":
            with server.lock:
                count = server.count
            self._reply(f"Count {count}\n")
            return
        with server.lock:
            server.count += 1
        self._reply(f"URL.Path = {_quote(self._url_path())}\n")


class RequestEchoHandler(_PlainTextHandler):
    """Echoes the request line, headers, host, remote address and form values."""

    def _form(self) -> dict[str, list[str]]:
        form: dict[str, list[str]] = {}
        pairs: list[tuple[str, str]] = []
        content_type = self.headers.get("Content-Type", "").split(";")[0].strip().lower()
        if self.command in ("POST", "PUT", "PATCH") and (
            content_type == "application/x-www-form-urlencoded"
        ):
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length).decode("utf-8", errors="replace")
            pairs.extend(parse_qsl(body, keep_blank_values=True))
        pairs.extend(parse_qsl(urlsplit(self.path).query, keep_blank_values=True))
        for key, value in pairs:
            form.setdefault(key, []).append(value)
        return form

    def _echo(self) -> None:
        lines = [f"{self.command} {self.path} {self.request_version}"]
        headers: dict[str, list[str]] = {}
        for key, value in self.headers.items():
            name = _canonical_header(key)
            if name != "Host":
                headers.setdefault(name, []).append(value)
        lines.extend(f"Header[{_quote(k)}] = {_quote_list(v)}" for k, v in headers.items())
        host, port = self.client_address[:2]
        lines.append(f"Host = {_quote(self.headers.get('Host', ''))}")
        lines.append(f"RemoteAddr = {_quote(f'{host}:{port}')}")
        lines.extend(f"Form[{_quote(k)}] = {_quote_list(v)}" for k, v in self._form().items())
        self._reply("".join(line + "\n" for line in lines))

    def do_GET(self) -> None:
        self._echo()

    def do_POST(self) -> None:
        self._echo()


def make_server(handler_class: type[BaseHTTPRequestHandler], address=ADDRESS) -> _Server:
    """Create a threading HTTP server, with a request counter, bound to ``address``."""
    return _Server(address, handler_class)


_HANDLERS = {"echo": EchoHandler, "count": CountingHandler, "request": RequestEchoHandler}


def main(argv: list[str] | None = None) -> int:
    """Serve one of the echo servers on localhost:8000 until interrupted."""
    parser = argparse.ArgumentParser(prog="server", description="Run an echo server.")
    parser.add_argument("kind", nargs="?", choices=sorted(_HANDLERS), default="echo")
    options = parser.parse_args(argv)
    with make_server(_HANDLERS[options.kind]) as server:
        server.serve_forever()
    return 0