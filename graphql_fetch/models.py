"""
Request and response models for graphql_fetch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """
    Default options for every request a client sends.

    ``headers`` and ``fetch`` are used by the request pipeline. Any other
    field is passed verbatim to the transport, e.g. ``timeout``, ``session``
    or ``ssl`` for the default aiohttp transport.
    """

    # Left untyped so native header collections and pair lists are kept as
    # given instead of being coerced into a new dict.
    headers: Optional[Any] = Field(default=None, description="Default request headers")
    fetch: Optional[Callable[..., Any]] = Field(
        default=None, description="Transport override; defaults to the aiohttp fetch"
    )

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    @property
    def passthrough(self) -> Dict[str, Any]:
        """Extra fields forwarded to the transport."""
        return dict(self.model_extra or {})


# Result members with their own GraphQLResponse field
ENVELOPE_KEYS = frozenset(["data", "extensions", "errors", "headers", "status"])


@dataclass
class GraphQLResponse:
    """
    Successful result of a raw request.

    Top-level result members other than data, extensions and errors are kept
    in ``extra``.
    """

    data: Any
    headers: Any
    status: int
    extensions: Optional[Any] = None
    errors: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def get_data(self, path: Optional[str] = None) -> Any:
        """
        Get data from the result with an optional path.

        Args:
            path: Dot-separated path into the data (e.g., "user.profile.name")

        Returns:
            Data at the specified path, the full data if no path is given, or
            None when the path does not exist
        """
        if not path:
            return self.data

        current = self.data
        for key in path.split("."):
            if isinstance(current, dict) and key in current:
                current = current[key]
            elif isinstance(current, list) and key.isdigit() and int(key) < len(current):
                current = current[int(key)]
            else:
                return None

        return current
