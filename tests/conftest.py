"""
Shared test fixtures and configuration for the graphql_fetch test suite.
"""

import json
from typing import Any, Dict, List, Optional

import pytest
import aioresponses
from multidict import CIMultiDict, CIMultiDictProxy

from graphql_fetch.transport import FetchResponse

GRAPHQL_URL = "https://api.example.com/graphql"


def make_response(
    payload: Any = None,
    status: int = 200,
    content_type: Optional[str] = "application/json",
    headers: Optional[Dict[str, str]] = None,
    text: Optional[str] = None,
) -> FetchResponse:
    """Build a buffered response with a JSON or text body."""
    response_headers = CIMultiDict(headers or {})
    if content_type is not None:
        response_headers["Content-Type"] = content_type

    body = text if text is not None else json.dumps(payload)
    return FetchResponse(
        status=status,
        headers=CIMultiDictProxy(response_headers),
        body=body.encode("utf-8"),
        url=GRAPHQL_URL,
    )


class RecordingFetch:
    """Fake transport that records every call and replays queued responses."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.responses: List[FetchResponse] = []

    def queue(self, *args: Any, **kwargs: Any) -> "RecordingFetch":
        self.responses.append(make_response(*args, **kwargs))
        return self

    async def __call__(self, target: Any, **init: Any) -> FetchResponse:
        self.calls.append({"target": target, **init})
        if self.responses:
            return self.responses.pop(0)
        return make_response({"data": {}})

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def graphql_url() -> str:
    return GRAPHQL_URL


@pytest.fixture
def recording_fetch() -> RecordingFetch:
    """Fake transport for pipeline and client tests."""
    return RecordingFetch()


@pytest.fixture
def mock_aiohttp():
    """Mock aiohttp responses for the default transport."""
    with aioresponses.aioresponses() as m:
        yield m


@pytest.fixture
def user_query() -> str:
    return "query GetUser($id: ID!) { user(id: $id) { id name } }"


def pytest_collection_modifyitems(config, items):
    """Add markers based on test names and paths."""
    for item in items:
        if "test_transport" in item.nodeid:
            item.add_marker(pytest.mark.http)
        if not any(marker.name == "http" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def response_factory():
    """Factory for buffered FetchResponse objects."""
    return make_response
