"""Movies encoded as JSON."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass, field
from typing import Any, Iterable

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Movie:
    """A movie with its release year and leading actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form; ``color`` is left out when false."""
        data: dict[str, Any] = {"Title": self.title, "released": self.year}
        if self.color:
            data["color"] = True
        data["Actors"] = list(self.actors)
        return data


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def to_json(movies: Iterable[Movie], indent: str | None = None) -> str:
    """Encode movies as a JSON array, compact or indented by ``indent``."""
    objects = [m.to_dict() for m in movies]
    if indent is None:
        text = json.dumps(objects, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(objects, ensure_ascii=False, indent=indent, separators=(",", ": "))
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def _title_of(obj: Any) -> str:
    if obj is None:
        return ""
    if not isinstance(obj, dict):
        raise ValueError(f"cannot decode {type(obj).__name__} into a movie title")
    if "Title" in obj:
        value = obj["Title"]
    else:
        value = next((v for k, v in obj.items() if k.casefold() == "title"), "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {type(value).__name__} into a title string")
    return value


def titles(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return their titles."""
    decoded = json.loads(data)
    if not isinstance(decoded, list):
        raise ValueError("expected a JSON array of movies")
    return [_title_of(obj) for obj in decoded]


def main(argv: list[str] | None = None) -> int:
    """Print the sample movies as compact and indented JSON, then their titles."""
    argparse.ArgumentParser(prog="movie", description="Print movies as JSON.").parse_args(argv)
    print(to_json(MOVIES))
    data = to_json(MOVIES, indent="    ")
    print(data)
    print("[" + " ".join(f"{{{t}}}" for t in titles(data)) + "]")
    return 0