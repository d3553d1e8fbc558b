"""Signature models for the 1Shot SDK."""
from __future__ import annotations

from typing import Literal, Optional

from .base import Number, OneShotModel, Str, Uuid

SignatureType = Literal["erc3009", "permit2"]


class GetSignatureParams(OneShotModel):
    """Parameters for requesting a token-transfer authorization signature.

    ``amount`` is in the token's smallest unit. ``valid_after`` only applies to
    Permit2 and ``from_address`` only to ERC-3009; the gateway rejects or
    ignores them otherwise.
    """

    wallet_id: Uuid
    type: SignatureType
    contract_address: Str
    destination_address: Str
    amount: Optional[Str] = None
    valid_until: Optional[Number] = None
    valid_after: Optional[Number] = None
    from_address: Optional[Str] = None


class SignatureResponse(OneShotModel):
    """A signature together with the exact data that was signed."""

    signature: Str
    data: Str
