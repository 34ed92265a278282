"""
GraphQL client implementation.

This module provides GraphQLClient, which holds an endpoint and default
request options, and the one-shot ``raw_request`` / ``request`` helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union

from graphql import GraphQLSchema
from multidict import MultiMapping

from .headers import HeadersInit
from .models import ENVELOPE_KEYS, GraphQLResponse, RequestOptions
from .pipeline import (
    RequestDocument,
    raise_for_result,
    resolve_request_document,
    send_request,
)

if TYPE_CHECKING:
    from .config.models import ClientConfig


Endpoint = Union[str, GraphQLSchema]


class GraphQLClient:
    """
    Minimal GraphQL client.

    The client sends each operation as a single HTTP POST through a
    fetch-style transport and either returns the result or raises
    ClientError. It performs no retries, caching or batching.

    Examples:
        Basic query:
        ```python
        client = GraphQLClient(
            "https://api.example.com/graphql",
            {"headers": {"Authorization": "Bearer token"}},
        )

        data = await client.request(
            '''
            query GetUser($id: ID!) {
                user(id: $id) { name email }
            }
            ''',
            {"id": "123"},
        )
        print(data["user"]["name"])
        ```

        Full response envelope:
        ```python
        response = await client.raw_request("{ me { id } }")
        print(response.status, response.headers["Content-Type"])
        print(response.data, response.extensions)
        ```

        Executing against an in-process schema:
        ```python
        from graphql_fetch.transport import schema_fetch

        client = GraphQLClient(schema, {"fetch": schema_fetch})
        ```
    """

    def __init__(
        self,
        url_or_schema: Endpoint,
        options: Optional[Union[RequestOptions, Dict[str, Any]]] = None,
    ) -> None:
        """
        Initialize GraphQL client.

        Args:
            url_or_schema: Endpoint URL, or a schema handle for a transport
                that executes in-process
            options: Default request options; plain dicts are converted to
                RequestOptions
        """
        self.url: Optional[str] = None
        self.schema: Optional[GraphQLSchema] = None
        self._assign_endpoint(url_or_schema)

        if options is None:
            options = RequestOptions()
        elif not isinstance(options, RequestOptions):
            options = RequestOptions(**options)
        self.options = options

    @classmethod
    def from_config(cls, config: "ClientConfig") -> "GraphQLClient":
        """Create a client from a loaded ClientConfig."""
        options = RequestOptions(headers=dict(config.headers), **config.options)
        return cls(config.endpoint, options)

    def _assign_endpoint(self, url_or_schema: Endpoint) -> None:
        if isinstance(url_or_schema, str):
            self.url = url_or_schema
            self.schema = None
        else:
            self.url = None
            self.schema = url_or_schema

    @property
    def target(self) -> Any:
        """The endpoint handed to the transport."""
        return self.url if self.url is not None else self.schema

    def set_endpoint(self, url_or_schema: Endpoint) -> "GraphQLClient":
        """Point the client at another URL or schema."""
        self._assign_endpoint(url_or_schema)
        return self

    async def raw_request(
        self,
        query: RequestDocument,
        variables: Optional[Dict[str, Any]] = None,
        request_headers: Optional[HeadersInit] = None,
    ) -> GraphQLResponse:
        """
        Send an operation and return the full response envelope.

        Args:
            query: Operation text or parsed document
            variables: Operation variables
            request_headers: Headers for this request, merged over the
                client's default headers

        Returns:
            GraphQLResponse with data, extensions, headers and status

        Raises:
            ClientError: If the request is not a GraphQL success
        """
        resolved = resolve_request_document(query)
        response, result = await send_request(
            self.target, self.options, resolved, variables, request_headers
        )
        raise_for_result(response, result, resolved, variables)

        return GraphQLResponse(
            data=result["data"],
            extensions=result.get("extensions"),
            errors=result.get("errors"),
            extra={
                key: value
                for key, value in result.items()
                if key not in ENVELOPE_KEYS
            },
            headers=response.headers,
            status=response.status,
        )

    async def request(
        self,
        document: RequestDocument,
        variables: Optional[Dict[str, Any]] = None,
        request_headers: Optional[HeadersInit] = None,
    ) -> Any:
        """
        Send an operation and return only its data.

        Args:
            document: Operation text or parsed document
            variables: Operation variables
            request_headers: Headers for this request, merged over the
                client's default headers

        Returns:
            The ``data`` member of the GraphQL result

        Raises:
            ClientError: If the request is not a GraphQL success
        """
        resolved = resolve_request_document(document)
        response, result = await send_request(
            self.target, self.options, resolved, variables, request_headers
        )
        raise_for_result(response, result, resolved, variables)
        return result["data"]

    def set_headers(self, headers: Optional[HeadersInit]) -> "GraphQLClient":
        """Replace all default headers."""
        self.options.headers = headers
        return self

    def set_header(self, key: str, value: str) -> "GraphQLClient":
        """
        Set one default header; all subsequent requests will send it.

        Only mutable mappings can be updated in place. Defaults given as a
        sequence of pairs or as a read-only collection raise TypeError; use
        set_headers to replace them instead.
        """
        headers = self.options.headers

        if headers is None:
            self.options.headers = {key: value}
        elif isinstance(headers, (list, tuple)):
            raise TypeError("set_header() cannot update headers given as name/value pairs")
        elif isinstance(headers, MultiMapping) and not hasattr(headers, "__setitem__"):
            raise TypeError("set_header() cannot update a read-only header collection")
        else:
            headers[key] = value

        return self

    def __repr__(self) -> str:
        return f"<GraphQLClient target={self.target!r}>"


async def raw_request(
    url_or_schema: Endpoint,
    query: RequestDocument,
    variables: Optional[Dict[str, Any]] = None,
    request_headers: Optional[HeadersInit] = None,
) -> GraphQLResponse:
    """Send one operation with a throwaway client and return the envelope."""
    client = GraphQLClient(url_or_schema)
    return await client.raw_request(query, variables, request_headers)


async def request(
    url_or_schema: Endpoint,
    document: RequestDocument,
    variables: Optional[Dict[str, Any]] = None,
    request_headers: Optional[HeadersInit] = None,
) -> Any:
    """
    Send a GraphQL document to a server and return its data.

    Examples:
        ```python
        # A raw string
        data = await request("https://foo.bar/graphql", "{ users { id } }")

        # A parsed graphql-core document
        from graphql import parse

        data = await request("https://foo.bar/graphql", parse("{ users { id } }"))

        # The passthrough gql helper, for editor tooling keyed on the name
        data = await request("https://foo.bar/graphql", gql("{ users { id } }"))
        ```
    """
    client = GraphQLClient(url_or_schema)
    return await client.request(document, variables, request_headers)


def gql(chunks: Union[str, Sequence[str]], *values: Any) -> str:
    """
    Passthrough helper for GraphQL literals.

    Joins literal chunks with the given values interpolated after each chunk,
    the way a template literal is assembled. Nothing is parsed or validated;
    the helper exists so tooling that recognizes ``gql`` (syntax
    highlighting, formatters) applies to the operation text.

    Examples:
        >>> gql("{ users { id } }")
        '{ users { id } }'
        >>> gql(["query { user(id: ", ") { name } }"], 5)
        'query { user(id: 5) { name } }'
    """
    if isinstance(chunks, str):
        chunks = [chunks]

    text = ""
    for index, chunk in enumerate(chunks):
        text += chunk
        if index < len(values):
            text += str(values[index])
    return text
