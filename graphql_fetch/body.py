"""
Request body construction.

Operations are sent as a JSON document. When the variables contain file
objects the body is built as a multipart form instead, following the GraphQL
multipart request convention: an ``operations`` field with the files nulled
out, a ``map`` field locating each file in the variables, and one form field
per file.
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import aiohttp

RequestBody = Union[str, aiohttp.FormData]


def is_extractable_file(value: Any) -> bool:
    """Whether value is uploaded as a file rather than serialized as JSON."""
    return isinstance(value, io.IOBase)


def extract_files(
    value: Any, path: str = ""
) -> Tuple[Any, Dict[int, Tuple[Any, List[str]]]]:
    """
    Replace file objects in a nested structure with None.

    Args:
        value: Nested dicts, lists and tuples to search
        path: Object path prefix of value

    Returns:
        Tuple of (clone with files replaced by None, files). ``files`` maps
        ``id(file)`` to the file object and every dotted path it was found at,
        in discovery order.
    """
    files: Dict[int, Tuple[Any, List[str]]] = {}

    def walk(node: Any, node_path: str) -> Any:
        if is_extractable_file(node):
            entry = files.setdefault(id(node), (node, []))
            entry[1].append(node_path)
            return None

        prefix = f"{node_path}." if node_path else ""
        if isinstance(node, dict):
            return {key: walk(item, f"{prefix}{key}") for key, item in node.items()}
        if isinstance(node, (list, tuple)):
            return [walk(item, f"{prefix}{index}") for index, item in enumerate(node)]
        return node

    clone = walk(value, path)
    return clone, files


def _filename(file: Any) -> Optional[str]:
    name = getattr(file, "name", None)
    if isinstance(name, str):
        return Path(name).name
    return None


def create_request_body(query: str, variables: Optional[Dict[str, Any]] = None) -> RequestBody:
    """
    Build the transport body for an operation.

    Args:
        query: Operation text
        variables: Operation variables

    Returns:
        A JSON string, or an ``aiohttp.FormData`` when variables contain files
    """
    clone, files = extract_files(variables, "variables")

    if not files:
        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        return json.dumps(payload)

    operations: Dict[str, Any] = {"query": query, "variables": clone}

    form = aiohttp.FormData()
    form.add_field("operations", json.dumps(operations))

    file_map: Dict[str, List[str]] = {}
    for index, (_, paths) in enumerate(files.values()):
        file_map[str(index)] = paths
    form.add_field("map", json.dumps(file_map))

    for index, (file, _) in enumerate(files.values()):
        form.add_field(str(index), file, filename=_filename(file))

    return form
