"""1Shot SDK Models."""
from .base import OneShotModel
from .common import PagedResponse, SuccessResponse, Transaction
from .wallet import (
    AccountBalanceDetails,
    CreateWalletParams,
    DeleteWalletParams,
    GetWalletParams,
    ListWalletsParams,
    TransferParams,
    UpdateWalletParams,
    Wallet,
)
from .delegation import (
    CreateDelegationParams,
    Delegation,
    DeleteDelegationParams,
    ListDelegationsParams,
)
from .signature import GetSignatureParams, SignatureResponse, SignatureType
from .contract_event import (
    ContractEvent,
    ContractEventIdParams,
    ContractEventLog,
    ContractEventSearchResult,
    ContractEventStatus,
    CreateContractEventParams,
    ListContractEventsParams,
    SearchContractEventLogsParams,
    Topic,
    UpdateContractEventParams,
)
from .errors import (
    APIError,
    AuthenticationError,
    ConnectionError,
    FieldError,
    NotFoundError,
    OneShotError,
    RateLimitError,
    RequestValidationError,
    ResponseValidationError,
    TimeoutError,
    TransportError,
    ValidationError,
)

__all__ = [
    "OneShotModel",
    "PagedResponse",
    "SuccessResponse",
    "Transaction",
    "AccountBalanceDetails",
    "Wallet",
    "ListWalletsParams",
    "CreateWalletParams",
    "GetWalletParams",
    "UpdateWalletParams",
    "DeleteWalletParams",
    "TransferParams",
    "Delegation",
    "ListDelegationsParams",
    "CreateDelegationParams",
    "DeleteDelegationParams",
    "SignatureType",
    "GetSignatureParams",
    "SignatureResponse",
    "Topic",
    "ContractEvent",
    "ContractEventLog",
    "ContractEventSearchResult",
    "ContractEventStatus",
    "CreateContractEventParams",
    "ListContractEventsParams",
    "ContractEventIdParams",
    "UpdateContractEventParams",
    "SearchContractEventLogsParams",
    "OneShotError",
    "FieldError",
    "ValidationError",
    "RequestValidationError",
    "ResponseValidationError",
    "TransportError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "TimeoutError",
    "ConnectionError",
]
