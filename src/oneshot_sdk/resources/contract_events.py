"""
Contract events resource for the 1Shot SDK.

Contract events are definitions of on-chain events the gateway watches for a
business; their logs can be searched by block range and indexed topics.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.common import PagedResponse, SuccessResponse
from ..models.contract_event import (
    ContractEvent,
    ContractEventIdParams,
    ContractEventSearchResult,
    CreateContractEventParams,
    ListContractEventsParams,
    SearchContractEventLogsParams,
    UpdateContractEventParams,
)
from .base import AsyncBaseResource

# Fixed query-string order for list filters.
CONTRACT_EVENT_LIST_FILTERS = (
    "pageSize",
    "page",
    "chainId",
    "name",
    "status",
    "contractAddress",
    "eventName",
)


class ContractEventsResource(AsyncBaseResource):
    """Async resource for contract event definitions and log search.

    Example:
        ```python
        async with OneShotClient(api_key="...", api_secret="...") as client:
            event = await client.contract_events.create(
                business_id,
                chain_id=8453,
                contract_address=token_address,
                name="USDC transfers",
                description="Incoming transfers to the treasury",
                event_name="Transfer",
            )

            result = await client.contract_events.search_logs(
                event.id,
                start_block=19_000_000,
                topics={"to": treasury_address},
            )
            live = [log for log in result.logs if not log.removed]
        ```
    """

    async def create(self, business_id: str, **fields: Any) -> ContractEvent:
        """Create a contract event definition.

        Args:
            business_id: The owning business
            **fields: ``chain_id``, ``contract_address``, ``name``,
                ``description`` and ``event_name`` (all required)

        Returns:
            The created ContractEvent
        """
        params = self._validate_params(
            CreateContractEventParams, {**fields, "businessId": business_id}
        )
        data = await self._post(
            f"/business/{params.business_id}/events",
            params.to_dict(),
        )
        return self._validate_response(ContractEvent, data)

    async def list(
        self,
        business_id: str,
        **filters: Any,
    ) -> PagedResponse[ContractEvent]:
        """List a business's contract event definitions.

        Args:
            business_id: The owning business
            **filters: Optional ``page_size``, ``page``, ``chain_id``,
                ``name``, ``status`` (``"active"``, ``"deleted"`` or
                ``"all"``), ``contract_address``, ``event_name``

        Returns:
            One page of contract events
        """
        params = self._validate_params(
            ListContractEventsParams, {**filters, "businessId": business_id}
        )
        path = self._build_path(
            f"/business/{params.business_id}/events",
            self._query_pairs(params, CONTRACT_EVENT_LIST_FILTERS),
        )
        data = await self._get(path)
        return self._validate_response(PagedResponse[ContractEvent], data)

    async def get(self, contract_event_id: str) -> ContractEvent:
        """Get a contract event definition by ID."""
        params = self._validate_params(
            ContractEventIdParams, {"contractEventId": contract_event_id}
        )
        data = await self._get(f"/events/{params.contract_event_id}")
        return self._validate_response(ContractEvent, data)

    async def update(self, contract_event_id: str, **fields: Any) -> ContractEvent:
        """Update a contract event's name and/or description.

        Args:
            contract_event_id: The contract event ID
            **fields: ``name``, ``description``. Neither may be ``None``.

        Returns:
            The updated ContractEvent
        """
        target = self._validate_params(
            ContractEventIdParams, {"contractEventId": contract_event_id}
        )
        params = self._validate_params(UpdateContractEventParams, fields)
        data = await self._put(f"/events/{target.contract_event_id}", params.to_dict())
        return self._validate_response(ContractEvent, data)

    async def delete(self, contract_event_id: str) -> SuccessResponse:
        """Delete a contract event definition."""
        params = self._validate_params(
            ContractEventIdParams, {"contractEventId": contract_event_id}
        )
        data = await self._delete(f"/events/{params.contract_event_id}")
        return self._validate_response(SuccessResponse, data)

    async def search_logs(
        self,
        contract_event_id: str,
        params: Optional[Dict[str, Any]] = None,
        **filters: Any,
    ) -> ContractEventSearchResult:
        """Search the chain for logs of a contract event.

        Called without filters it searches every block.

        Args:
            contract_event_id: The contract event ID
            params: Optional filter mapping
            **filters: ``start_block``, ``end_block``, ``topics`` (indexed
                parameter name -> value); merged over ``params``

        Returns:
            The matching logs, plus range hints when the search was too wide
        """
        target = self._validate_params(
            ContractEventIdParams, {"contractEventId": contract_event_id}
        )
        search = self._validate_params(
            SearchContractEventLogsParams, {**(params or {}), **filters}
        )
        data = await self._post(f"/events/{target.contract_event_id}/search", search.to_dict())
        return self._validate_response(ContractEventSearchResult, data)


__all__ = [
    "ContractEventsResource",
]
