from __future__ import annotations

from till.domain.currency.denominations import all_elements
from till.domain.register.errors import TransactionError, TransactionFailure
from till.domain.register.inventory import Inventory


class CashRegister:
    """A till holding bills and coins that settles sales and hands out change.

    Not safe for concurrent use: callers serialize transactions per register.
    """

    def __init__(self, initial: Inventory) -> None:
        self._holdings = initial.copy()

    @property
    def holdings(self) -> Inventory:
        return self._holdings.copy()

    @property
    def total(self) -> int:
        return self._holdings.total

    def perform_transaction(self, price: int, amount_paid: Inventory) -> Inventory:
        """Take ``amount_paid`` for an item costing ``price`` minor units.

        Returns the change handed back. Raises ``TransactionError`` without
        touching the holdings when the price is not positive, the payment
        is short, or exact change cannot be assembled.
        """
        if price <= 0:
            raise TransactionError(TransactionFailure.INVALID_PRICE)
        if amount_paid.total < price:
            raise TransactionError(TransactionFailure.INSUFFICIENT_PAYMENT)

        change_due = amount_paid.total - price
        if change_due == 0:
            self._holdings.merge(amount_paid)
            return Inventory.none()

        available = self._holdings.copy().merge(amount_paid)
        change = compute_change(change_due, available)

        self._holdings.merge(amount_paid)
        for element, count in change.items():
            self._holdings.remove(element, count)
        return change


def compute_change(amount_due: int, available: Inventory) -> Inventory:
    """Single greedy pass from the largest denomination down.

    Exact for canonical systems such as the euro set. For other systems it
    may give up on an amount that a different selection could still pay.
    """
    remaining = amount_due
    result = Inventory()
    for element in all_elements():
        take = min(available.get_count(element), remaining // element.minor_value)
        if take > 0:
            result.add(element, take)
            remaining -= element.minor_value * take
        if remaining == 0:
            break

    if remaining > 0:
        raise TransactionError(TransactionFailure.NOT_ENOUGH_CHANGE)
    return result
