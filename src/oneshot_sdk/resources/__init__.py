"""
Resources for the 1Shot SDK.

This module exports the resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, Transport
from .wallets import WalletsResource
from .contract_events import ContractEventsResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "Transport",
    # Wallets, delegations and signatures
    "WalletsResource",
    # Contract events
    "ContractEventsResource",
]
