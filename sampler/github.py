"""Searching the GitHub issue tracker."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus
from typing import Any
from urllib.error import HTTPError
from urllib.parse import quote_plus
from urllib.request import urlopen

ISSUES_URL = "https://api.github.com/search/issues"


class SearchError(Exception):
    """The issue search was answered with a failure status."""


@dataclass
class User:
    """An account on the tracker."""

    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    """One issue; its body is Markdown."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime | None = None
    body: str = ""


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues returned."""

    total_count: int = 0
    items: list[Issue] = field(default_factory=list)


def _get(obj: dict[str, Any], key: str, default: Any = None) -> Any:
    """Look up ``key``, preferring an exact match and then any case-insensitive one."""
    if key in obj:
        return obj[key]
    folded = key.casefold()
    return next((v for k, v in obj.items() if k.casefold() == folded), default)


def _text(obj: dict[str, Any], key: str) -> str:
    value = _get(obj, key)
    return "" if value is None else str(value)


def _time(value: str | None) -> datetime | None:
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _user(obj: dict[str, Any] | None) -> User | None:
    if obj is None:
        return None
    return User(login=_text(obj, "login"), html_url=_text(obj, "html_url"))


def _issue(obj: dict[str, Any]) -> Issue:
    return Issue(
        number=int(_get(obj, "number", 0) or 0),
        html_url=_text(obj, "html_url"),
        title=_text(obj, "title"),
        state=_text(obj, "state"),
        user=_user(_get(obj, "user")),
        created_at=_time(_get(obj, "created_at")),
        body=_text(obj, "body"),
    )


def parse_result(data: str | bytes | dict[str, Any]) -> IssuesSearchResult:
    """Decode a search response, given as JSON text or an already decoded object."""
    obj = json.loads(data) if isinstance(data, (str, bytes)) else data
    if not isinstance(obj, dict):
        raise ValueError("expected a JSON object")
    items = _get(obj, "items") or []
    return IssuesSearchResult(
        total_count=int(_get(obj, "total_count", 0) or 0),
        items=[_issue(item) for item in items if item is not None],
    )


def search_issues(terms: list[str]) -> IssuesSearchResult:
    """Query the issue tracker for issues matching all ``terms``."""
    url = f"{ISSUES_URL}?q={quote_plus(' '.join(terms))}"
    try:
        with urlopen(url) as resp:
            if resp.status != HTTPStatus.OK:
                raise SearchError(f"search query failed: {resp.status} {resp.reason}")
            data = resp.read()
    except HTTPError as err:
        raise SearchError(f"search query failed: {err.code} {err.reason}") from err
    return parse_result(data)