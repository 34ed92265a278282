#!/usr/bin/env python3
"""
Basic usage examples for the graphql_fetch library.

This script demonstrates one-shot requests, a reusable client with default
headers, error handling and file uploads against a public GraphQL API.
"""

import asyncio
import io

from graphql_fetch import ClientError, GraphQLClient, gql, raw_request, request

ENDPOINT = "https://countries.trevorblades.com/graphql"


async def example_one_shot() -> None:
    """Example: Send a single query without managing a client."""
    print("=== One-shot request ===\n")

    query = gql("""
        query Country($code: ID!) {
            country(code: $code) {
                name
                capital
            }
        }
    """)
    data = await request(ENDPOINT, query, {"code": "NL"})
    print(f"Country: {data['country']['name']} ({data['country']['capital']})\n")

    response = await raw_request(ENDPOINT, "{ continents { code } }")
    print(f"Status: {response.status}")
    print(f"Content-Type: {response.headers.get('Content-Type')}")
    print(f"Continents: {len(response.get_data('continents'))}\n")


async def example_client() -> None:
    """Example: Reuse a client with default headers."""
    print("=== Client with default headers ===\n")

    client = GraphQLClient(ENDPOINT, {"headers": {"X-Client": "graphql-fetch-example"}})
    client.set_header("Accept-Language", "en")

    data = await client.request(
        "{ languages { code name } }",
        request_headers={"X-Request-Id": "example-1"},
    )
    print(f"Languages: {len(data['languages'])}\n")


async def example_errors() -> None:
    """Example: Handle GraphQL errors."""
    print("=== Error handling ===\n")

    try:
        await request(ENDPOINT, "{ doesNotExist }")
    except ClientError as e:
        print(f"Status: {e.status}")
        for error in e.errors or []:
            print(f"Error: {error['message']}")
        print(f"Query: {e.query}\n")


async def example_upload() -> None:
    """Example: Build a multipart upload (servers must support uploads)."""
    print("=== File upload ===\n")

    try:
        await request(
            ENDPOINT,
            "mutation Upload($file: Upload!) { upload(file: $file) }",
            {"file": io.BytesIO(b"hello")},
        )
    except ClientError as e:
        print(f"Upload rejected as expected: {e.status}\n")


async def main() -> None:
    await example_one_shot()
    await example_client()
    await example_errors()
    await example_upload()


if __name__ == "__main__":
    asyncio.run(main())
