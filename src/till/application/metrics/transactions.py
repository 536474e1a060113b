from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

from till.domain.common.ids import RegisterId
from till.domain.register.errors import TransactionFailure

TRANSACTIONS_TOTAL = Counter(
    "till_transactions_total",
    "Total number of register transactions by outcome.",
    ["register_id", "outcome"],
)

CHANGE_RETURNED_CENTS = Histogram(
    "till_change_returned_cents",
    "Change handed back per successful transaction, in cents.",
    ["register_id"],
    buckets=(0, 10, 50, 100, 500, 1000, 5000, 10000, 50000, float("inf")),
)

REGISTER_TOTAL_CENTS = Gauge(
    "till_register_total_cents",
    "Current value held by the register, in cents.",
    ["register_id"],
)


def record_transaction_completed(
    register_id: RegisterId, change_cents: int, register_total_cents: int
) -> None:
    TRANSACTIONS_TOTAL.labels(register_id=str(register_id), outcome="completed").inc()
    CHANGE_RETURNED_CENTS.labels(register_id=str(register_id)).observe(change_cents)
    REGISTER_TOTAL_CENTS.labels(register_id=str(register_id)).set(register_total_cents)


def record_transaction_rejected(register_id: RegisterId, reason: TransactionFailure) -> None:
    TRANSACTIONS_TOTAL.labels(register_id=str(register_id), outcome=reason.value.lower()).inc()


def record_register_total(register_id: RegisterId, register_total_cents: int) -> None:
    REGISTER_TOTAL_CENTS.labels(register_id=str(register_id)).set(register_total_cents)
