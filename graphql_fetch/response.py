"""Response body classification."""

from __future__ import annotations

from typing import Any

from .transport import Response

JSON_CONTENT_TYPE = "application/json"


async def get_result(response: Response) -> Any:
    """
    Read the response body as JSON or as text, depending on Content-Type.

    Bodies whose Content-Type starts with ``application/json`` are parsed as
    JSON; anything else, including a missing Content-Type, is read as text.
    A malformed JSON body raises the decoder's error unchanged.
    """
    content_type = response.headers.get("Content-Type")
    if content_type and content_type.startswith(JSON_CONTENT_TYPE):
        return await response.json()
    return await response.text()
