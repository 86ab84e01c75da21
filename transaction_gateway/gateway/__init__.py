"""
Outbound side of the transaction gateway

This module provides:
- TransactionGateway, which builds and issues Astra DB REST calls
- Transport error types raised when no remote response is obtained
"""

from .service import (
    GatewayError,
    RemoteTimeoutError,
    RemoteUnavailableError,
    TransactionGateway,
    TOKEN_HEADER,
)


__all__ = [
    "GatewayError",
    "RemoteTimeoutError",
    "RemoteUnavailableError",
    "TransactionGateway",
    "TOKEN_HEADER",
]
