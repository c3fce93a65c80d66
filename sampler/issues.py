"""Reporting issue search results as a table, a text report or an HTML page."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from urllib.parse import urlsplit

import jinja2

from .github import Issue, IssuesSearchResult, SearchError, search_issues

_RULE = "-" * 40

_ISSUE_LIST = """
<h1>{{ result.total_count }} issues</h1>
<table>
<tr style='text-align: left'>
  <th>#</th>
  <th>State</th>
  <th>User</th>
  <th>Title</th>
</tr>
{% for item in result.items %}
<tr>
  <td><a href='{{ item.html_url | url }}'>{{ item.number }}</a></td>
  <td>{{ item.state }}</td>
  <td><a href='{{ item.user.html_url | url }}'>{{ item.user.login }}</a></td>
  <td><a href='{{ item.html_url | url }}'>{{ item.title }}</a></td>
</tr>
{% endfor %}
</table>
"""

_AUTOESCAPE = "<p>A: {{ a }}</p><p>B: {{ b | safe }}</p>"


def _safe_url(url: object) -> str:
    text = "" if url is None or isinstance(url, jinja2.Undefined) else str(url)
    scheme = urlsplit(text).scheme.lower() if ":" in text else ""
    if scheme and scheme not in ("http", "https", "mailto"):
        return "#ZgotmplZ"
    return text


_ENV = jinja2.Environment(autoescape=True, keep_trailing_newline=True)
_ENV.filters["url"] = _safe_url
_HTML_TEMPLATE = _ENV.from_string(_ISSUE_LIST)
_AUTOESCAPE_TEMPLATE = _ENV.from_string(_AUTOESCAPE)


def _login(item: Issue) -> str:
    if item.user is None:
        raise ValueError(f"issue #{item.number} has no user")
    return item.user.login


def format_table(result: IssuesSearchResult) -> str:
    """Return one line per issue: number, user and the start of the title."""
    lines = [f"{result.total_count} issues:"]
    lines.extend(
        f"#{item.number:<5d} {_login(item)[:9]:>9} {item.title[:55]}" for item in result.items
    )
    return "".join(line + "\n" for line in lines)


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Return the number of whole days from ``t`` to ``now``."""
    if t is None:
        raise ValueError("no time given")
    now = datetime.now(timezone.utc) if now is None else now
    return int((now - t).total_seconds() / 3600 / 24)


def render_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Return a multi-line text report of each issue and its age."""
    parts = [f"{result.total_count} issues:\n"]
    for item in result.items:
        parts.append(
            f"{_RULE}\n"
            f"Number: {item.number}\n"
            f"User:   {_login(item)}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(item.created_at, now)} days\n"
        )
    return "".join(parts)


def render_html(result: IssuesSearchResult) -> str:
    """Return an HTML table of the issues, with all values escaped."""
    return _HTML_TEMPLATE.render(result=result)


def autoescape_demo() -> str:
    """Render the same markup once as untrusted text and once as trusted HTML."""
    return _AUTOESCAPE_TEMPLATE.render(a="<b>Hello!</b>", b="<b>Hello!</b>")


def main(argv: list[str] | None = None) -> int:
    """Search for issues matching the terms and print them in the chosen form."""
    parser = argparse.ArgumentParser(prog="issues", description="Report matching issues.")
    parser.add_argument("--format", choices=("table", "report", "html"), default="table")
    parser.add_argument("--autoescape", action="store_true", help="show HTML escaping")
    parser.add_argument("terms", nargs="*")
    options = parser.parse_args(argv)

    if options.autoescape:
        sys.stdout.write(autoescape_demo())
        return 0
    try:
        result = search_issues(options.terms)
        if options.format == "table":
            text = format_table(result)
        elif options.format == "report":
            text = render_report(result)
        else:
            text = render_html(result)
    except (SearchError, OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0