"""Fetching URLs, one after another or all at once with timings."""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Iterator
from urllib.error import HTTPError
from urllib.request import urlopen

_CHUNK = 64 * 1024


def _open(url: str):
    """Open ``url``; an HTTP error status still yields a readable response."""
    try:
        return urlopen(url)
    except HTTPError as err:
        return err


def _chunks(resp) -> Iterator[bytes]:
    return iter(lambda: resp.read(_CHUNK), b"")


def fetch(url: str) -> bytes:
    """Return the body found at ``url``, whatever the response status."""
    with _open(url) as resp:
        return resp.read()


def fetch_timed(url: str) -> str:
    """Fetch ``url``, discard the body and describe the time taken and bytes read.

    A failure is described instead of raised.
    """
    start = time.perf_counter()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    try:
        with resp:
            nbytes = sum(len(chunk) for chunk in _chunks(resp))
    except OSError as err:
        return f"while reading {url}: {err}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all ``urls`` in parallel, yielding each description as it completes."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(fetch_timed, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print the content found at each URL; stop at the first failure."""
    parser = argparse.ArgumentParser(prog="fetch", description="Print the content of URLs.")
    parser.add_argument("urls", nargs="*")
    options = parser.parse_args(argv)
    for url in options.urls:
        try:
            resp = _open(url)
        except (OSError, ValueError) as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        try:
            with resp:
                body = resp.read()
        except OSError as err:
            print(f"fetch: reading {url}: {err}", file=sys.stderr)
            return 1
        sys.stdout.flush()
        sys.stdout.buffer.write(body)
        sys.stdout.buffer.flush()
    return 0


def main_all(argv: list[str] | None = None) -> int:
    """Fetch URLs in parallel and report their times and sizes."""
    parser = argparse.ArgumentParser(prog="fetchall", description="Fetch URLs in parallel.")
    parser.add_argument("urls", nargs="*")
    options = parser.parse_args(argv)
    start = time.perf_counter()
    for line in fetch_all(options.urls):
        print(line)
    print(f"{time.perf_counter() - start:.2f}s elapsed")
    return 0