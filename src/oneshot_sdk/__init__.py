"""
1Shot Python SDK

A typed async client for the 1Shot blockchain transaction gateway. Every
request is validated before it is sent and every response is validated
before it is returned.
"""

from .client import OneShotClient
from .models.errors import (
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
from .models.common import PagedResponse, SuccessResponse, Transaction
from .models.wallet import AccountBalanceDetails, Wallet
from .models.delegation import Delegation
from .models.signature import SignatureResponse, SignatureType
from .models.contract_event import (
    ContractEvent,
    ContractEventLog,
    ContractEventSearchResult,
    ContractEventStatus,
    Topic,
)
from .validation import validate

__version__ = "0.1.0"

__all__ = [
    # Client
    "OneShotClient",
    # Validation
    "validate",
    # Errors
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
    # Common models
    "PagedResponse",
    "SuccessResponse",
    "Transaction",
    # Wallet models
    "Wallet",
    "AccountBalanceDetails",
    "Delegation",
    "SignatureResponse",
    "SignatureType",
    # Contract event models
    "ContractEvent",
    "ContractEventLog",
    "ContractEventSearchResult",
    "ContractEventStatus",
    "Topic",
]
