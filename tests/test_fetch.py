import re
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from sampler.fetch import fetch, fetch_all, fetch_timed, main, main_all

BODY = b"hello, world\n"
MISSING = b"nope"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/missing":
            self.send_response(404)
            body = MISSING
        else:
            self.send_response(200)
            body = BODY
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def dead_url():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}/"


def _timed_pattern(url):
    return re.compile(r"\d+\.\d{2}s  +(\d+)  " + re.escape(url))


def test_fetch_returns_body(base_url):
    assert fetch(base_url + "/page") == BODY


def test_fetch_returns_body_of_error_status(base_url):
    assert fetch(base_url + "/missing") == MISSING


def test_fetch_unreachable_raises(dead_url):
    with pytest.raises(OSError):
        fetch(dead_url)


def test_fetch_timed_counts_bytes(base_url):
    url = base_url + "/a"
    match = _timed_pattern(url).fullmatch(fetch_timed(url))
    assert match is not None
    assert int(match.group(1)) == len(BODY)


def test_fetch_timed_describes_failure(dead_url):
    message = fetch_timed(dead_url)
    assert _timed_pattern(dead_url).fullmatch(message) is None
    assert message


def test_fetch_all_reports_every_url(base_url):
    urls = [base_url + "/one", base_url + "/two", base_url + "/missing"]
    lines = list(fetch_all(urls))
    assert len(lines) == len(urls)
    assert sorted(line.split()[-1] for line in lines) == sorted(urls)


def test_fetch_all_empty():
    assert list(fetch_all([])) == []


def test_main_prints_body(base_url, capsysbinary):
    assert main([base_url + "/x"]) == 0
    assert capsysbinary.readouterr().out == BODY


def test_main_fails_on_unreachable(dead_url, capsys):
    assert main([dead_url]) == 1
    assert capsys.readouterr().err.startswith("fetch: ")


def test_main_all_reports_elapsed(base_url, capsys):
    assert main_all([base_url + "/x"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"\d+\.\d{2}s elapsed", lines[-1])