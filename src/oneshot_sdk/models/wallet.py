"""Wallet models for the 1Shot SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from .base import Bool, Int, NonNegativeInt, Number, OneShotModel, PositiveInt, Str, Uuid

# Chain technology discriminator. Only EVM chains exist today.
EVM = 0


class AccountBalanceDetails(OneShotModel):
    """Balance of one token held by a wallet.

    ``balance`` is a decimal string in the token's smallest unit, kept as a
    string to avoid precision loss. ``token_address`` is empty for the
    chain's native currency.
    """

    type: Int
    ticker: Str
    chain_id: PositiveInt
    token_address: Str
    account_address: Str
    balance: Str
    decimals: NonNegativeInt

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: int) -> int:
        if value != EVM:
            raise PydanticCustomError("chain_type", "Type must be 0 (EVM)")
        return value


class Wallet(OneShotModel):
    """An escrow wallet that holds funds and submits transactions."""

    id: Uuid
    account_address: Str
    business_id: Optional[Uuid] = None
    user_id: Optional[Uuid] = None
    chain_id: PositiveInt
    name: Str
    description: Str
    is_admin: Bool
    account_balance_details: Optional[AccountBalanceDetails] = None
    erc7702_contract_address: Optional[Str] = Field(
        default=None, alias="erc7702ContractAddress"
    )
    updated: Number
    created: Number


# ==================== Request parameters ====================


class ListWalletsParams(OneShotModel):
    """Parameters for listing a business's wallets."""

    business_id: Uuid
    chain_id: Optional[PositiveInt] = None
    page_size: Optional[PositiveInt] = None
    page: Optional[PositiveInt] = None
    name: Optional[Str] = None


class CreateWalletParams(OneShotModel):
    """Parameters for creating a wallet."""

    business_id: Uuid
    chain_id: PositiveInt
    name: Str
    description: Optional[Str] = None


class GetWalletParams(OneShotModel):
    wallet_id: Uuid
    include_balances: Optional[Bool] = None


class UpdateWalletParams(OneShotModel):
    """Parameters for renaming or re-describing a wallet."""

    wallet_id: Uuid
    name: Optional[Str] = None
    description: Optional[Str] = None


class DeleteWalletParams(OneShotModel):
    wallet_id: Uuid


class TransferParams(OneShotModel):
    """Parameters for a native-currency transfer out of a wallet.

    Omitting ``transfer_amount`` asks the gateway to send as much as it can
    while leaving enough to cover gas. ``memo`` may be omitted but not null.
    """

    wallet_id: Uuid
    destination_account_address: Str
    transfer_amount: Optional[Str] = None
    memo: Str = None  # type: ignore[assignment]
