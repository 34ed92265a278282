"""
Request pipeline shared by GraphQLClient.raw_request and GraphQLClient.request.

The pipeline resolves the document to text, builds the body, merges headers,
calls the transport, reads the body and classifies the outcome. Failures are
raised as ClientError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from graphql import DocumentNode, print_ast

from .body import RequestBody, create_request_body
from .exceptions import ClientError
from .headers import HeadersInit, resolve_headers
from .models import RequestOptions
from .response import get_result
from .transport import Response, fetch as default_fetch

logger = logging.getLogger(__name__)

RequestDocument = Union[str, DocumentNode]


def resolve_request_document(document: RequestDocument) -> str:
    """Return the operation text of a document, printing parsed documents."""
    if isinstance(document, str):
        return document
    return print_ast(document)


def build_request_headers(
    body: RequestBody,
    default_headers: Optional[HeadersInit] = None,
    request_headers: Optional[HeadersInit] = None,
) -> Dict[str, str]:
    """
    Merge request headers.

    Layers, later ones overwriting earlier ones key by key:
    ``Content-Type: application/json`` for string bodies, the client's
    default headers, then the per-call headers. Multipart bodies get no
    Content-Type here so the transport can set the boundary.
    """
    headers: Dict[str, str] = {}
    if isinstance(body, str):
        headers["Content-Type"] = "application/json"
    headers.update(resolve_headers(default_headers))
    headers.update(resolve_headers(request_headers))
    return headers


async def send_request(
    target: Any,
    options: RequestOptions,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    request_headers: Optional[HeadersInit] = None,
) -> Tuple[Response, Any]:
    """
    Send an operation through the configured transport.

    Args:
        target: Endpoint URL or schema handle, passed to the transport as-is
        options: Client request options, read as they are at call time
        query: Operation text
        variables: Operation variables
        request_headers: Headers for this request only

    Returns:
        Tuple of (transport response, parsed JSON or raw text body)
    """
    transport = options.fetch or default_fetch
    body = create_request_body(query, variables)

    # Explicit request fields win over passthrough options with the same name.
    init: Dict[str, Any] = options.passthrough
    init["method"] = "POST"
    init["headers"] = build_request_headers(body, options.headers, request_headers)
    init["body"] = body

    logger.debug("Sending GraphQL request to %s", target)
    response = await transport(target, **init)
    logger.debug("GraphQL response status %s from %s", response.status, target)

    result = await get_result(response)
    return response, result


def is_successful(response: Response, result: Any) -> bool:
    """Transport success, no GraphQL errors and a ``data`` field present."""
    return (
        bool(response.ok)
        and isinstance(result, Mapping)
        and not result.get("errors")
        and "data" in result
    )


def raise_for_result(
    response: Response,
    result: Any,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Raise ClientError unless the response is a GraphQL success.

    Text bodies (and JSON that is not an object) are reported as
    ``{"error": body}``; JSON objects are reported as parsed. Status and
    headers of the response are always attached.
    """
    if is_successful(response, result):
        return

    if isinstance(result, Mapping):
        payload: Dict[str, Any] = dict(result)
    else:
        payload = {"error": result}
    payload["status"] = response.status
    payload["headers"] = response.headers

    logger.debug("GraphQL request failed with status %s", response.status)
    raise ClientError(payload, {"query": query, "variables": variables})
