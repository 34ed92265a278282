"""
Tests for header normalization and merging.
"""

from email.message import Message

import pytest
from multidict import CIMultiDict, CIMultiDictProxy, MultiDict

from graphql_fetch.headers import headers_to_dict, resolve_headers
from graphql_fetch.pipeline import build_request_headers


def _message(*pairs):
    message = Message()
    for name, value in pairs:
        message[name] = value
    return message


class TestResolveHeaders:
    """Test converting header representations to plain dicts."""

    @pytest.mark.parametrize("headers", [None, {}, [], ()])
    def test_absent_headers(self, headers):
        assert resolve_headers(headers) == {}

    def test_equivalent_representations(self):
        """All representations with the same content give the same dict."""
        expected = {"Authorization": "Bearer abc", "X-Trace": "1"}
        representations = [
            {"Authorization": "Bearer abc", "X-Trace": "1"},
            [("Authorization", "Bearer abc"), ("X-Trace", "1")],
            [["Authorization", "Bearer abc"], ["X-Trace", "1"]],
            (("Authorization", "Bearer abc"), ("X-Trace", "1")),
            CIMultiDict([("Authorization", "Bearer abc"), ("X-Trace", "1")]),
            CIMultiDictProxy(CIMultiDict([("Authorization", "Bearer abc"), ("X-Trace", "1")])),
            MultiDict([("Authorization", "Bearer abc"), ("X-Trace", "1")]),
            _message(("Authorization", "Bearer abc"), ("X-Trace", "1")),
        ]

        for headers in representations:
            resolved = resolve_headers(headers)
            assert resolved == expected
            assert all(type(key) is str for key in resolved)

    def test_pairs_last_wins(self):
        headers = [("X-Mode", "a"), ("X-Other", "b"), ("X-Mode", "c")]

        assert resolve_headers(headers) == {"X-Mode": "c", "X-Other": "b"}

    def test_native_collection_last_wins(self):
        headers = CIMultiDict()
        headers.add("X-Mode", "a")
        headers.add("X-Mode", "b")

        assert headers_to_dict(headers) == {"X-Mode": "b"}

    def test_mapping_passed_through(self):
        headers = {"X-Mode": "a"}

        assert resolve_headers(headers) is headers


class TestBuildRequestHeaders:
    """Test header merge order."""

    def test_json_body_gets_content_type(self):
        assert build_request_headers('{"query": "{ a }"}') == {
            "Content-Type": "application/json"
        }

    def test_non_string_body_has_no_content_type(self):
        assert build_request_headers(object(), {"X-A": "1"}) == {"X-A": "1"}

    def test_precedence(self):
        """Call headers beat client headers, which beat the default."""
        headers = build_request_headers(
            "{}",
            [("Content-Type", "application/graphql"), ("X-Client", "client"), ("X-Both", "client")],
            CIMultiDict({"X-Both": "call", "X-Call": "call"}),
        )

        assert headers == {
            "Content-Type": "application/graphql",
            "X-Client": "client",
            "X-Both": "call",
            "X-Call": "call",
        }

    def test_call_headers_override_content_type(self):
        headers = build_request_headers("{}", None, {"Content-Type": "text/plain"})

        assert headers == {"Content-Type": "text/plain"}

    def test_merge_does_not_mutate_inputs(self):
        defaults = {"X-A": "1"}
        build_request_headers("{}", defaults, {"X-A": "2"})

        assert defaults == {"X-A": "1"}
