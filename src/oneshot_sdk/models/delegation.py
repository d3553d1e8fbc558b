"""Delegation models for the 1Shot SDK."""
from __future__ import annotations

from typing import Optional

from .base import Number, OneShotModel, PositiveInt, Str, StrList, Uuid


class Delegation(OneShotModel):
    """
    A grant letting an escrow wallet act on behalf of a delegator address.

    - No ``start_time`` means the delegation is effective immediately
    - No ``end_time`` means it never expires
    - An empty or missing allow-list permits every contract / method
    """

    id: Uuid
    business_id: Uuid
    escrow_wallet_id: Uuid
    delegator_address: Str
    start_time: Optional[Number] = None
    end_time: Optional[Number] = None
    contract_addresses: Optional[StrList] = None
    methods: Optional[StrList] = None
    delegation_data: Str
    updated: Number
    created: Number


class ListDelegationsParams(OneShotModel):
    wallet_id: Uuid
    page_size: Optional[PositiveInt] = None
    page: Optional[PositiveInt] = None


class CreateDelegationParams(OneShotModel):
    """Parameters for registering a delegation on a wallet.

    ``delegation_data`` is the signed delegation serialized as JSON, with big
    integers encoded as strings. Omitting ``start_time`` / ``end_time`` and
    sending them as ``None`` are both accepted and reach the gateway
    differently (absent vs. ``null``).
    """

    wallet_id: Uuid
    start_time: Optional[Number] = None
    end_time: Optional[Number] = None
    contract_addresses: Optional[StrList] = None
    methods: Optional[StrList] = None
    delegation_data: Str


class DeleteDelegationParams(OneShotModel):
    delegation_id: Uuid
