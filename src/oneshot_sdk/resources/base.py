"""
Base resource class for the 1Shot SDK.

Every resource method follows the same pipeline:

1. merge path identifiers and caller options into one candidate mapping
2. validate it against the operation's parameter schema
3. build the path, query string and body from the validated model
4. make exactly one transport call
5. validate the response against the operation's response schema

Nothing here retries, caches or swallows errors; transport failures reach
the caller unchanged.
"""
from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)
from urllib.parse import urlencode

from pydantic import BaseModel

from ..validation import validate, wire_keys

M = TypeVar("M", bound=BaseModel)


class Transport(Protocol):
    """The HTTP capability a resource needs.

    ``path`` may carry a query string; ``body`` is sent as JSON.
    """

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        ...


def query_value(value: Any) -> str:
    """Render a scalar the way the gateway expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The transport (normally the OneShotClient)
    """

    def __init__(self, client: Transport) -> None:
        """Initialize the resource.

        Args:
            client: Any object exposing ``async request(method, path, body=None)``
        """
        self._client = client

    # ==================== Validation ====================

    @staticmethod
    def _validate_params(schema: Type[M], candidate: Dict[str, Any]) -> M:
        return validate(schema, candidate, source="request")

    @staticmethod
    def _validate_response(schema: Type[M], data: Any) -> M:
        return validate(schema, data, source="response")

    # ==================== Path building ====================

    @staticmethod
    def _query_pairs(
        params: BaseModel,
        keys: Iterable[str],
    ) -> List[Tuple[str, str]]:
        """Collect ``(wire_name, value)`` pairs from a validated model.

        ``keys`` are wire names in the order they must appear; fields that are
        absent, ``None`` or unknown to the model are skipped.
        """
        by_alias = {
            (field.alias or name): name for name, field in type(params).model_fields.items()
        }
        pairs: List[Tuple[str, str]] = []
        for key in keys:
            name = by_alias.get(key)
            if name is None:
                continue
            value = getattr(params, name)
            if value is None:
                continue
            pairs.append((key, query_value(value)))
        return pairs

    @staticmethod
    def _caller_order(schema: Type[BaseModel], options: Dict[str, Any]) -> List[str]:
        """Wire names of ``options`` in the order the caller supplied them."""
        return list(wire_keys(schema, options))

    @staticmethod
    def _build_path(path: str, query: Sequence[Tuple[str, str]] = ()) -> str:
        """Append a query string to ``path``; no ``?`` when it is empty."""
        if not query:
            return path
        return f"{path}?{urlencode(list(query))}"

    @staticmethod
    def _body(params: BaseModel, fields: Iterable[str]) -> Dict[str, Any]:
        """Dump the listed fields of a validated model as a JSON body.

        Fields the caller never set are omitted; fields explicitly set to
        ``None`` are sent as ``null``.
        """
        return params.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            include=set(fields),
        )

    # ==================== HTTP ====================

    async def _get(self, path: str) -> Any:
        return await self._client.request("GET", path)

    async def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self._client.request("POST", path, data)

    async def _put(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self._client.request("PUT", path, data)

    async def _delete(self, path: str) -> Any:
        return await self._client.request("DELETE", path)


__all__ = [
    "AsyncBaseResource",
    "Transport",
    "query_value",
]
