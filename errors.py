"""
Exceptions raised while preparing and submitting a fast market order.

Every failure of a run is terminal; main() catches FastOrderError once,
logs what the error carries and exits non-zero.
"""

from typing import Optional


class FastOrderError(Exception):
    """Base exception for all order submission errors."""
    pass


class ConfigurationError(FastOrderError):
    """Raised when the credential or a chain configuration is missing."""
    pass


class OrderValidationError(FastOrderError):
    """
    Raised when the order parameters are rejected before any write call.

    Covers the amount/fee relationship, integer ranges of the ABI
    arguments, a malformed redeemer address and an insufficient balance.
    """
    pass


class RemoteCallError(FastOrderError):
    """
    Raised when the RPC endpoint or the contract rejects a call.

    Attributes:
        reason: Revert reason, when the node returned one
        data: Raw revert data
        transaction: The transaction fields that were sent (to, from, data, value)
    """

    def __init__(
        self,
        message: str,
        reason: Optional[str] = None,
        data: Optional[object] = None,
        transaction: Optional[dict] = None,
    ):
        self.message = message
        self.reason = reason
        self.data = data
        self.transaction = transaction or {}
        super().__init__(message)


class TransactionFailedError(RemoteCallError):
    """Raised when a mined transaction has a status of 0."""

    def __init__(self, tx_hash: str, transaction: Optional[dict] = None):
        self.tx_hash = tx_hash
        super().__init__(
            f"Transaction {tx_hash} reverted", transaction=transaction
        )
