"""
Wallets resource for the 1Shot SDK.

Covers escrow wallets and the two families that hang off them: delegations
and transfer-authorization signatures.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from ..models.common import PagedResponse, SuccessResponse, Transaction
from ..models.delegation import (
    CreateDelegationParams,
    Delegation,
    DeleteDelegationParams,
    ListDelegationsParams,
)
from ..models.signature import GetSignatureParams, SignatureResponse, SignatureType
from ..models.wallet import (
    CreateWalletParams,
    DeleteWalletParams,
    GetWalletParams,
    ListWalletsParams,
    TransferParams,
    UpdateWalletParams,
    Wallet,
)
from .base import AsyncBaseResource

logger = logging.getLogger(__name__)

# Query parameters each list endpoint accepts. Wallet and delegation lists
# emit them in the order the caller passed them.
WALLET_LIST_FILTERS = ("chainId", "pageSize", "page", "name")
DELEGATION_LIST_FILTERS = ("pageSize", "page")

# Signature queries always lead with the two required addresses.
SIGNATURE_QUERY_ORDER = (
    "contractAddress",
    "destinationAddress",
    "amount",
    "validUntil",
    "validAfter",
    "fromAddress",
)


class WalletsResource(AsyncBaseResource):
    """Async resource for managing wallets, delegations and signatures.

    Example:
        ```python
        async with OneShotClient(api_key="...", api_secret="...") as client:
            wallet = await client.wallets.create(
                business_id,
                chain_id=11155111,
                name="Treasury",
            )

            page = await client.wallets.list(business_id, chain_id=11155111)

            signature = await client.wallets.get_signature(
                wallet.id,
                "erc3009",
                contract_address=usdc_address,
                destination_address=merchant_address,
                amount="1000000",
            )
        ```
    """

    async def list(self, business_id: str, **filters: Any) -> PagedResponse[Wallet]:
        """List a business's wallets.

        Args:
            business_id: The business that owns the wallets
            **filters: Optional ``chain_id``, ``page_size``, ``page``, ``name``.
                They are sent in the order given; ``None`` values are dropped.

        Returns:
            One page of wallets
        """
        params = self._validate_params(
            ListWalletsParams, {**filters, "businessId": business_id}
        )
        order = [
            key
            for key in self._caller_order(ListWalletsParams, filters)
            if key in WALLET_LIST_FILTERS
        ]
        path = self._build_path(
            f"/business/{params.business_id}/wallets",
            self._query_pairs(params, order),
        )
        data = await self._get(path)
        return self._validate_response(PagedResponse[Wallet], data)

    async def create(self, business_id: str, **fields: Any) -> Wallet:
        """Create a wallet for a business.

        Args:
            business_id: The business to create the wallet for
            **fields: ``chain_id`` and ``name`` (required), ``description``

        Returns:
            The created Wallet
        """
        params = self._validate_params(
            CreateWalletParams, {**fields, "businessId": business_id}
        )
        body = self._body(params, ("chain_id", "name", "description"))
        data = await self._post(f"/business/{params.business_id}/wallets", body)
        return self._validate_response(Wallet, data)

    async def get(
        self,
        wallet_id: str,
        include_balances: Optional[bool] = None,
    ) -> Wallet:
        """Get a wallet by ID.

        Args:
            wallet_id: The wallet ID
            include_balances: Ask the gateway to attach the current balance

        Returns:
            The Wallet
        """
        params = self._validate_params(
            GetWalletParams,
            {"walletId": wallet_id, "includeBalances": include_balances},
        )
        path = self._build_path(
            f"/wallets/{params.wallet_id}",
            self._query_pairs(params, ("includeBalances",)),
        )
        data = await self._get(path)
        return self._validate_response(Wallet, data)

    async def update(self, wallet_id: str, **fields: Any) -> Wallet:
        """Update a wallet's name and/or description.

        Args:
            wallet_id: The wallet ID
            **fields: ``name``, ``description``

        Returns:
            The updated Wallet
        """
        params = self._validate_params(
            UpdateWalletParams, {**fields, "walletId": wallet_id}
        )
        body = self._body(params, ("name", "description"))
        data = await self._put(f"/wallets/{params.wallet_id}", body)
        return self._validate_response(Wallet, data)

    async def delete(self, wallet_id: str) -> SuccessResponse:
        """Delete a wallet.

        Args:
            wallet_id: The wallet ID
        """
        params = self._validate_params(DeleteWalletParams, {"walletId": wallet_id})
        data = await self._delete(f"/wallets/{params.wallet_id}")
        return self._validate_response(SuccessResponse, data)

    async def transfer(self, wallet_id: str, **fields: Any) -> Transaction:
        """Transfer native currency out of a wallet.

        Args:
            wallet_id: The wallet to send from
            **fields: ``destination_account_address`` (required),
                ``transfer_amount`` (omit to drain the wallet as far as gas
                allows), ``memo``

        Returns:
            The gateway's transaction record, passed through as received
        """
        params = self._validate_params(
            TransferParams, {**fields, "walletId": wallet_id}
        )
        body = self._body(
            params, ("destination_account_address", "transfer_amount", "memo")
        )
        logger.debug("Submitting transfer from wallet %s", params.wallet_id)
        return await self._post(f"/wallets/{params.wallet_id}/transfer", body)

    # ==================== Delegations ====================

    async def list_delegations(
        self,
        wallet_id: str,
        **paging: Any,
    ) -> PagedResponse[Delegation]:
        """List the delegations registered on a wallet.

        Args:
            wallet_id: The wallet ID
            **paging: Optional ``page_size`` and ``page``

        Returns:
            One page of delegations
        """
        params = self._validate_params(
            ListDelegationsParams, {**paging, "walletId": wallet_id}
        )
        order = [
            key
            for key in self._caller_order(ListDelegationsParams, paging)
            if key in DELEGATION_LIST_FILTERS
        ]
        path = self._build_path(
            f"/wallets/{params.wallet_id}/delegations",
            self._query_pairs(params, order),
        )
        data = await self._get(path)
        return self._validate_response(PagedResponse[Delegation], data)

    async def create_delegation(self, wallet_id: str, **fields: Any) -> Delegation:
        """Register a delegation on a wallet.

        Args:
            wallet_id: The escrow wallet that will act for the delegator
            **fields: ``delegation_data`` (required), ``start_time``,
                ``end_time``, ``contract_addresses``, ``methods``. Omitting a
                field and passing ``None`` are sent differently.

        Returns:
            The created Delegation
        """
        params = self._validate_params(
            CreateDelegationParams, {**fields, "walletId": wallet_id}
        )
        body = self._body(
            params,
            ("start_time", "end_time", "contract_addresses", "methods", "delegation_data"),
        )
        data = await self._post(f"/wallets/{params.wallet_id}/delegations", body)
        return self._validate_response(Delegation, data)

    async def delete_delegation(self, delegation_id: str) -> SuccessResponse:
        """Delete a delegation.

        The gateway exposes this under the singular ``/delegation`` prefix.

        Args:
            delegation_id: The delegation ID
        """
        params = self._validate_params(
            DeleteDelegationParams, {"delegationId": delegation_id}
        )
        data = await self._delete(f"/delegation/{params.delegation_id}")
        return self._validate_response(SuccessResponse, data)

    # ==================== Signatures ====================

    async def get_signature(
        self,
        wallet_id: str,
        type: SignatureType,
        **fields: Any,
    ) -> SignatureResponse:
        """Have a wallet sign a token-transfer authorization.

        Args:
            wallet_id: The signing wallet
            type: ``"erc3009"`` or ``"permit2"``
            **fields: ``contract_address`` and ``destination_address``
                (required), ``amount``, ``valid_until``, ``valid_after``,
                ``from_address``

        Returns:
            The signature and the data that was signed
        """
        params = self._validate_params(
            GetSignatureParams, {**fields, "walletId": wallet_id, "type": type}
        )
        path = self._build_path(
            f"/wallets/{params.wallet_id}/signature/{params.type}",
            self._query_pairs(params, SIGNATURE_QUERY_ORDER),
        )
        data = await self._get(path)
        return self._validate_response(SignatureResponse, data)


__all__ = [
    "WalletsResource",
]
