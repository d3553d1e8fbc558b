"""Shared response wrappers for the 1Shot SDK."""
from __future__ import annotations

from typing import Any, Dict, Generic, List, TypeVar

from .base import Bool, NonNegativeInt, OneShotModel, PositiveInt

T = TypeVar("T")

# Returned by wallet transfers. Its schema belongs to the transactions API;
# the SDK passes it through as received.
Transaction = Dict[str, Any]


class PagedResponse(OneShotModel, Generic[T]):
    """One page of a list endpoint.

    The last page may be partial: ``page * page_size`` can exceed
    ``total_results``.
    """

    response: List[T]
    page: PositiveInt
    page_size: PositiveInt
    total_results: NonNegativeInt


class SuccessResponse(OneShotModel):
    """Acknowledgement returned by delete endpoints."""

    success: Bool
