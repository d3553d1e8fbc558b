"""
Shared test data for 1Shot SDK tests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

BASE_URL = "https://api.1shotapi.com/v0"

BUSINESS_ID = "0b7a4f7e-57c4-4b0c-9f55-3f6c2b1a9d10"
WALLET_ID = "6f1e2d3c-4b5a-4978-8a6b-5c4d3e2f1a0b"
DELEGATION_ID = "9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d"
CONTRACT_EVENT_ID = "c3d2e1f0-a9b8-4c7d-8e6f-5a4b3c2d1e0f"


@dataclass
class RecordingTransport:
    """Stands in for the HTTP transport and records every call.

    Queued responses are returned in order; a queued exception is raised.
    """

    responses: List[Any] = field(default_factory=list)
    calls: List[Tuple[str, str, Optional[Dict[str, Any]]]] = field(default_factory=list)

    def queue(self, response: Any) -> "RecordingTransport":
        self.responses.append(response)
        return self

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        self.calls.append((method, path, body))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {path}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> Tuple[str, str, Optional[Dict[str, Any]]]:
        return self.calls[-1]


def paged(*items: Any, page: int = 1, page_size: int = 25, total: Optional[int] = None) -> dict:
    """Wrap items in a PagedResponse payload."""
    return {
        "response": list(items),
        "page": page,
        "pageSize": page_size,
        "totalResults": len(items) if total is None else total,
    }


MOCK_RESPONSES = {
    "wallet": {
        "id": WALLET_ID,
        "accountAddress": "0x1234567890abcdef1234567890abcdef12345678",
        "businessId": BUSINESS_ID,
        "userId": None,
        "chainId": 11155111,
        "name": "Treasury",
        "description": "Main escrow wallet",
        "isAdmin": False,
        "accountBalanceDetails": None,
        "erc7702ContractAddress": None,
        "updated": 1737331200,
        "created": 1737331200,
    },
    "balance": {
        "type": 0,
        "ticker": "ETH",
        "chainId": 11155111,
        "tokenAddress": "",
        "accountAddress": "0x1234567890abcdef1234567890abcdef12345678",
        "balance": "1250000000000000000",
        "decimals": 18,
    },
    "delegation": {
        "id": DELEGATION_ID,
        "businessId": BUSINESS_ID,
        "escrowWalletId": WALLET_ID,
        "delegatorAddress": "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd",
        "startTime": None,
        "endTime": 1767225600,
        "contractAddresses": ["0x1c7d4b196cb0c7b01d743fbc6116a902379c7238"],
        "methods": ["transfer"],
        "delegationData": '{"salt":"123456789012345678901234567890"}',
        "updated": 1737331200,
        "created": 1737331200,
    },
    "signature": {
        "signature": "0x" + "ab" * 65,
        "data": '{"domain":{"name":"USDC"}}',
    },
    "contract_event": {
        "id": CONTRACT_EVENT_ID,
        "businessId": BUSINESS_ID,
        "chainId": 8453,
        "contractAddress": "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",
        "name": "USDC transfers",
        "description": "Incoming transfers to the treasury",
        "eventName": "Transfer",
        "topicHash": "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef",
        "topics": [
            {"name": "from", "indexed": True},
            {"name": "to", "indexed": True},
            {"name": "value", "indexed": False},
        ],
        "updated": 1737331200,
        "created": 1737331200,
    },
    "log": {
        "eventName": "Transfer",
        "blockNumber": 25000000,
        "transactionHash": "0x" + "cd" * 32,
        "logIndex": 3,
        "removed": False,
        "topics": {
            "from": "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd",
            "to": "0x1234567890abcdef1234567890abcdef12345678",
            "value": "1000000",
        },
    },
    "transaction": {
        "id": "5d4c3b2a-1f0e-4d9c-8b7a-6f5e4d3c2b1a",
        "status": "Pending",
        "chainId": 11155111,
    },
}
