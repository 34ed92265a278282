"""
Fetch-style transports for graphql_fetch.

A transport is an async callable ``fetch(target, *, method, headers, body,
**options)`` returning an object that satisfies the Response protocol. The
default transport sends the request with aiohttp; ``schema_fetch`` executes
the request against an in-process graphql-core schema instead.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Protocol, Union

import aiohttp
from graphql import GraphQLSchema, graphql
from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from .exceptions import BodyConsumedError

logger = logging.getLogger(__name__)


class Response(Protocol):
    """What the request pipeline needs from a transport response."""

    ok: bool
    status: int
    headers: Any

    async def json(self) -> Any:
        ...

    async def text(self) -> str:
        ...


class FetchResponse:
    """
    Buffered HTTP response.

    The body has already been read off the wire; ``json()`` and ``text()``
    each consume it and only one read is allowed per response.
    """

    def __init__(
        self,
        status: int,
        headers: CIMultiDictProxy[str],
        body: bytes = b"",
        reason: Optional[str] = None,
        url: Optional[str] = None,
        charset: Optional[str] = None,
    ) -> None:
        self.status = status
        self.headers = headers
        self.reason = reason
        self.url = url
        self.charset = charset or "utf-8"
        self._body = body
        self._body_used = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def body_used(self) -> bool:
        return self._body_used

    def _consume(self) -> bytes:
        if self._body_used:
            raise BodyConsumedError("Response body has already been read", url=self.url)
        self._body_used = True
        return self._body

    async def text(self) -> str:
        content = self._consume()
        try:
            return content.decode(self.charset)
        except LookupError:
            return content.decode("utf-8")

    async def json(self) -> Any:
        return json.loads(await self.text())

    def __repr__(self) -> str:
        return f"<FetchResponse [{self.status}] {self.url}>"


async def fetch(
    url: Union[str, URL],
    *,
    method: str = "GET",
    headers: Optional[Dict[str, str]] = None,
    body: Any = None,
    session: Optional[aiohttp.ClientSession] = None,
    **kwargs: Any,
) -> FetchResponse:
    """
    Send an HTTP request with aiohttp and buffer the response.

    Args:
        url: Request URL
        method: HTTP method
        headers: Request headers
        body: Request body (str, bytes or aiohttp.FormData)
        session: Existing session to send through; left open afterwards
        **kwargs: Passed to ``aiohttp.ClientSession.request`` (timeout, ssl,
            proxy, ...)

    Returns:
        FetchResponse with the body fully read

    Raises:
        TypeError: If url is not a URL
        aiohttp.ClientError: On network failures
    """
    if not isinstance(url, (str, URL)):
        raise TypeError(
            f"fetch() needs a URL, got {type(url).__name__}; "
            "use schema_fetch for in-process schemas"
        )

    if session is not None:
        return await _send(session, url, method, headers, body, **kwargs)

    async with aiohttp.ClientSession() as owned_session:
        return await _send(owned_session, url, method, headers, body, **kwargs)


async def _send(
    session: aiohttp.ClientSession,
    url: Union[str, URL],
    method: str,
    headers: Optional[Dict[str, str]],
    body: Any,
    **kwargs: Any,
) -> FetchResponse:
    logger.debug("%s %s", method, url)
    async with session.request(
        method, url, headers=headers, data=body, **kwargs
    ) as response:
        content = await response.read()
        return FetchResponse(
            status=response.status,
            headers=CIMultiDictProxy(CIMultiDict(response.headers)),
            body=content,
            reason=response.reason,
            url=str(response.url),
            charset=response.charset,
        )


async def schema_fetch(
    schema: GraphQLSchema,
    *,
    method: str = "POST",
    headers: Optional[Dict[str, str]] = None,
    body: Any = None,
    root_value: Any = None,
    context_value: Any = None,
    **kwargs: Any,
) -> FetchResponse:
    """
    Execute a GraphQL request body against an in-process schema.

    Extra transport options are accepted and ignored so a client configured
    for HTTP can be pointed at a schema without changing its options.
    """
    if not isinstance(body, str):
        raise TypeError("schema_fetch only accepts JSON request bodies")

    payload = json.loads(body)
    logger.debug("Executing %s request in-process", method)
    result = await graphql(
        schema,
        payload["query"],
        root_value=root_value,
        context_value=context_value,
        variable_values=payload.get("variables"),
        operation_name=payload.get("operationName"),
    )

    return FetchResponse(
        status=200,
        headers=CIMultiDictProxy(CIMultiDict({"Content-Type": "application/json"})),
        body=json.dumps(result.formatted).encode("utf-8"),
    )
