"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import argparse
import math
import sys
from decimal import Decimal


def _format_g(value: float) -> str:
    """Format ``value`` in the shortest ``%g`` style: exponent form only when it is large or tiny."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    nd = len(digits)
    dp = exponent + nd
    exp = dp - 1
    eprec = nd if 6 > nd >= dp else 6
    if exp < -4 or exp >= eprec:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        return f"{sign}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if dp <= 0:
        body = "0." + "0" * -dp + digits
    elif dp >= nd:
        body = digits + "0" * (dp - nd)
    else:
        body = digits[:dp] + "." + digits[dp:]
    return sign + body


class _Temperature(float):
    unit = ""

    def __str__(self) -> str:
        return f"{_format_g(self)}{self.unit}"

    def __format__(self, spec: str) -> str:
        return str(self) if not spec else float.__format__(self, spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    unit = "°C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    unit = "°F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def _boiling() -> None:
    f = Fahrenheit(212.0)
    c = f_to_c(f)
    print(f"boiling point = {_format_g(f)}°F or {_format_g(c)}°C")


def _ftoc() -> None:
    for f in (32.0, 212.0):
        print(f"{_format_g(f)}°F = {_format_g(f_to_c(f))}°C")


def _cf(values: list[str]) -> int:
    for arg in values:
        try:
            t = float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        f, c = Fahrenheit(t), Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one of the temperature demonstrations."""
    parser = argparse.ArgumentParser(prog="tempconv")
    commands = parser.add_subparsers(dest="command", required=True)
    cf = commands.add_parser("cf", help="convert each number to Celsius and Fahrenheit")
    cf.add_argument("values", nargs="*")
    commands.add_parser("boiling", help="print the boiling point of water")
    commands.add_parser("ftoc", help="print two Fahrenheit-to-Celsius conversions")
    options = parser.parse_args(argv)

    if options.command == "cf":
        return _cf(options.values)
    if options.command == "boiling":
        _boiling()
    else:
        _ftoc()
    return 0