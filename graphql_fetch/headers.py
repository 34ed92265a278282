"""
Header normalization for graphql_fetch.

Headers may be supplied as a native header collection, a sequence of
``(name, value)`` pairs, or a plain mapping. Everything is normalized into a
plain dict before request headers are merged.
"""

from __future__ import annotations

from email.message import Message
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from multidict import MultiMapping

# Native header collections: aiohttp's multidicts and stdlib HTTP messages.
NATIVE_HEADER_TYPES = (MultiMapping, Message)

HeadersInit = Union[
    MultiMapping,
    Message,
    Sequence[Tuple[str, str]],
    Mapping[str, str],
]


def headers_to_dict(headers: Union[MultiMapping, Message]) -> Dict[str, str]:
    """
    Convert a native header collection into a plain dict.

    Repeated header names keep the last value seen.
    """
    result: Dict[str, str] = {}
    for name, value in headers.items():
        result[str(name)] = value
    return result


def resolve_headers(headers: Optional[HeadersInit]) -> Dict[str, str]:
    """
    Convert any supported header representation into a plain dict.

    Args:
        headers: Native header collection, list/tuple of pairs, plain mapping
            or None

    Returns:
        Plain mapping of header names to values. Plain mappings are returned
        as-is; callers that merge them make their own copy.
    """
    if not headers:
        return {}

    if isinstance(headers, NATIVE_HEADER_TYPES):
        return headers_to_dict(headers)

    if isinstance(headers, (list, tuple)):
        pairs: Dict[str, str] = {}
        for name, value in headers:
            pairs[name] = value
        return pairs

    return headers  # type: ignore[return-value]
