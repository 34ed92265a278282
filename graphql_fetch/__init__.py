"""
graphql_fetch - a minimal async GraphQL client.

Send a query or mutation with optional variables and headers as a single HTTP
POST and get back the result data or a ClientError.

Examples:
    One-shot request:
    ```python
    from graphql_fetch import gql, request

    query = gql('''
        query GetUser($id: ID!) {
            user(id: $id) { name }
        }
    ''')
    data = await request("https://api.example.com/graphql", query, {"id": "1"})
    ```

    Reusable client:
    ```python
    from graphql_fetch import ClientError, GraphQLClient

    client = GraphQLClient("https://api.example.com/graphql")
    client.set_header("Authorization", "Bearer token")

    try:
        data = await client.request("{ me { id } }")
    except ClientError as e:
        print(e.status, e.errors)
    ```
"""

from .body import create_request_body, extract_files
from .client import GraphQLClient, gql, raw_request, request
from .config import ClientConfig, ConfigLoader, LoggingConfig, LogLevel, load_config
from .exceptions import (
    BodyConsumedError,
    ClientError,
    ConfigurationError,
    GraphQLFetchError,
)
from .headers import HeadersInit, resolve_headers
from .logging import setup_logging
from .models import GraphQLResponse, RequestOptions
from .transport import FetchResponse, Response, fetch, schema_fetch

__version__ = "0.1.0"

__all__ = [
    # Client
    "GraphQLClient",
    "raw_request",
    "request",
    "gql",
    # Models
    "RequestOptions",
    "GraphQLResponse",
    "HeadersInit",
    # Exceptions
    "GraphQLFetchError",
    "ClientError",
    "BodyConsumedError",
    "ConfigurationError",
    # Transports
    "Response",
    "FetchResponse",
    "fetch",
    "schema_fetch",
    # Building blocks
    "resolve_headers",
    "create_request_body",
    "extract_files",
    # Configuration
    "ClientConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigLoader",
    "load_config",
    "setup_logging",
]
