from __future__ import annotations

from enum import Enum


class TransactionFailure(str, Enum):
    INVALID_PRICE = "INVALID_PRICE"
    INSUFFICIENT_PAYMENT = "INSUFFICIENT_PAYMENT"
    NOT_ENOUGH_CHANGE = "NOT_ENOUGH_CHANGE"


_MESSAGES = {
    TransactionFailure.INVALID_PRICE: "Transaction failed: Invalid Price.",
    TransactionFailure.INSUFFICIENT_PAYMENT: "Transaction failed: Insufficient payment.",
    TransactionFailure.NOT_ENOUGH_CHANGE: "Transaction failed: Cannot provide exact change.",
}


class TransactionError(Exception):
    """A transaction the register refused; the holdings are left untouched."""

    def __init__(self, reason: TransactionFailure, message: str | None = None) -> None:
        super().__init__(message or _MESSAGES[reason])
        self.reason = reason


class InventoryInvariantError(RuntimeError):
    pass
