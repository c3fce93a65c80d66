import io
import json
from datetime import datetime, timezone
from unittest import mock
from urllib.error import HTTPError

import pytest

from sampler.github import (
    ISSUES_URL,
    Issue,
    IssuesSearchResult,
    SearchError,
    User,
    parse_result,
    search_issues,
)


class _Response(io.BytesIO):
    def __init__(self, body, status=200, reason="OK"):
        super().__init__(body)
        self.status = status
        self.reason = reason


SAMPLE = {
    "total_count": 2,
    "items": [
        {
            "number": 5680,
            "html_url": "https://example.com/issues/5680",
            "title": "encoding/json: set key converter on en/decoder",
            "state": "open",
            "user": {"login": "eaigner", "html_url": "https://example.com/eaigner"},
            "created_at": "2016-01-02T15:04:05Z",
            "body": "text",
        }
    ],
}


def test_parse_result_fields():
    result = parse_result(json.dumps(SAMPLE))
    assert result.total_count == 2
    assert result.items == [
        Issue(
            number=5680,
            html_url="https://example.com/issues/5680",
            title="encoding/json: set key converter on en/decoder",
            state="open",
            user=User(login="eaigner", html_url="https://example.com/eaigner"),
            created_at=datetime(2016, 1, 2, 15, 4, 5, tzinfo=timezone.utc),
            body="text",
        )
    ]


def test_parse_result_keys_are_case_insensitive():
    result = parse_result({"TOTAL_COUNT": 3, "Items": [{"Number": 7, "User": None}]})
    assert result.total_count == 3
    assert result.items[0].number == 7
    assert result.items[0].user is None


def test_parse_result_rejects_array():
    with pytest.raises(ValueError):
        parse_result("[]")


def test_search_issues_queries_escaped_terms():
    body = json.dumps(SAMPLE).encode()
    with mock.patch("sampler.github.urlopen", return_value=_Response(body)) as opener:
        result = search_issues(["repo:example/project", "is:open", "json", "decoder"])
    assert opener.call_args[0][0] == ISSUES_URL + "?q=repo%3Aexample%2Fproject+is%3Aopen+json+decoder"
    assert result == parse_result(body)


def test_search_issues_http_error():
    err = HTTPError(ISSUES_URL, 403, "Forbidden", {}, None)
    with mock.patch("sampler.github.urlopen", side_effect=err):
        with pytest.raises(SearchError, match="^search query failed: 403 Forbidden$"):
            search_issues(["x"])


def test_search_issues_other_success_status_fails():
    with mock.patch("sampler.github.urlopen", return_value=_Response(b"", 204, "No Content")):
        with pytest.raises(SearchError, match="204"):
            search_issues(["x"])


def test_empty_result_default():
    assert parse_result("{}") == IssuesSearchResult()