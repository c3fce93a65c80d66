"""SHA-256 digests, and a description of the running platform."""

from __future__ import annotations

import argparse
import hashlib
import platform
import sys

_OS_NAMES = {"win32": "windows", "cygwin": "windows"}
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def sum256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def target() -> tuple[str, str]:
    """Return the operating system and architecture names of this platform."""
    os_name = sys.platform
    os_name = _OS_NAMES.get(os_name, "linux" if os_name.startswith("linux") else os_name)
    machine = platform.machine().lower()
    return os_name, _ARCH_NAMES.get(machine, machine)


def main(argv: list[str] | None = None) -> int:
    """Print the SHA-256 digest of each string and whether they are all equal."""
    parser = argparse.ArgumentParser(prog="digest")
    parser.add_argument("--target", action="store_true", help="print the OS and architecture")
    parser.add_argument("strings", nargs="*", default=["x", "X"])
    options = parser.parse_args(argv)

    if options.target:
        print(*target())
        return 0
    digests = [sum256(s.encode("utf-8")) for s in options.strings]
    for d in digests:
        print(d.hex())
    print(str(len(set(digests)) <= 1).lower())
    return 0