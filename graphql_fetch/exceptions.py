"""
Exceptions raised by graphql_fetch.

This module provides the error hierarchy for GraphQL requests. Classified
request failures are reported through ClientError; transport and JSON
decoding failures propagate unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional


class GraphQLFetchError(Exception):
    """
    Base exception for all graphql_fetch errors.

    Attributes:
        message: Human-readable error message
        url: Endpoint that caused the error (if applicable)
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.details = kwargs


class ClientError(GraphQLFetchError):
    """
    Raised when a GraphQL request is classified as failed.

    A request fails when the transport reports a non-success status, when the
    response body carries a non-empty ``errors`` list, or when the body has no
    ``data`` field.

    Attributes:
        response: Parsed error payload with ``errors`` (or ``error`` for
            non-JSON bodies), ``status`` and ``headers``
        request: The request context, ``{"query": ..., "variables": ...}``
    """

    def __init__(self, response: Dict[str, Any], request: Dict[str, Any]) -> None:
        message = self.extract_message(response)
        context = json.dumps(
            {"response": _jsonable(response), "request": request}, default=str
        )
        super().__init__(f"{message}: {context}")
        self.response = response
        self.request = request

    @staticmethod
    def extract_message(response: Mapping[str, Any]) -> str:
        """Message of the first GraphQL error, or a status-based fallback."""
        try:
            return str(response["errors"][0]["message"])
        except (KeyError, IndexError, TypeError):
            return f"GraphQL Error (Code: {response.get('status')})"

    @property
    def status(self) -> Optional[int]:
        return self.response.get("status")

    @property
    def headers(self) -> Any:
        return self.response.get("headers")

    @property
    def errors(self) -> Optional[List[Dict[str, Any]]]:
        return self.response.get("errors")

    @property
    def query(self) -> str:
        return self.request["query"]

    @property
    def variables(self) -> Any:
        return self.request.get("variables")

    def __reduce__(self) -> Any:
        return (self.__class__, (self.response, self.request))


class BodyConsumedError(GraphQLFetchError):
    """Raised when a response body is read more than once."""

    pass


class ConfigurationError(GraphQLFetchError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


def _jsonable(response: Mapping[str, Any]) -> Dict[str, Any]:
    # Header collections are not JSON serializable; render them as dicts.
    payload = dict(response)
    headers = payload.get("headers")
    if headers is not None and not isinstance(headers, dict):
        pairs = headers.items() if hasattr(headers, "items") else headers
        payload["headers"] = {str(k): v for k, v in pairs}
    return payload
