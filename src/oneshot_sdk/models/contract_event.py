"""Contract event models for the 1Shot SDK."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from .base import Bool, Int, OneShotModel, PositiveInt, Str, Uuid

ContractEventStatus = Literal["active", "deleted", "all"]


class Topic(OneShotModel):
    """A named parameter of a contract event."""

    name: Str
    indexed: Bool


class ContractEvent(OneShotModel):
    """A contract event definition monitored by the gateway.

    ``event_name`` matches the ABI event name exactly and ``topic_hash`` is
    the keccak256 hash of the event signature.
    """

    id: Uuid
    business_id: Uuid
    chain_id: Int
    contract_address: Str
    name: Str
    description: Str
    event_name: Str
    topic_hash: Str
    topics: List[Topic]
    updated: Int
    created: Int


class ContractEventLog(OneShotModel):
    """A decoded event log.

    ``removed`` is true when a chain reorganization invalidated the log;
    treat such logs as retracted.
    """

    event_name: Str
    block_number: Int
    transaction_hash: Str
    log_index: Int
    removed: Bool
    topics: Dict[str, Str]


class ContractEventSearchResult(OneShotModel):
    """Logs found by a search.

    When a range yields too many results the gateway sets ``error`` and
    suggests a narrower ``start_block`` / ``end_block``.
    """

    logs: List[ContractEventLog]
    error: Optional[Str] = None
    max_results: Optional[Int] = None
    start_block: Optional[Int] = None
    end_block: Optional[Int] = None


# ==================== Request parameters ====================


class CreateContractEventParams(OneShotModel):
    business_id: Uuid
    chain_id: Int
    contract_address: Str
    name: Str
    description: Str
    event_name: Str


class ListContractEventsParams(OneShotModel):
    """Filters for listing a business's contract events."""

    business_id: Uuid
    page_size: Optional[PositiveInt] = None
    page: Optional[PositiveInt] = None
    chain_id: Optional[Int] = None
    name: Optional[Str] = None
    status: Optional[ContractEventStatus] = None
    contract_address: Optional[Str] = None
    event_name: Optional[Str] = None


class ContractEventIdParams(OneShotModel):
    contract_event_id: Uuid


class UpdateContractEventParams(OneShotModel):
    """Fields that can change on a contract event. Neither may be null."""

    name: Str = None  # type: ignore[assignment]
    description: Str = None  # type: ignore[assignment]


class SearchContractEventLogsParams(OneShotModel):
    """Log search filters. All optional; no filters searches every block."""

    start_block: Optional[Int] = None
    end_block: Optional[Int] = None
    topics: Optional[Dict[str, Str]] = None
