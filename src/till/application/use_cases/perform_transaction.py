from __future__ import annotations

import logging

from opentelemetry import trace

from till.application.dto.requests import TransactionRequest
from till.application.dto.responses import TransactionResponse
from till.application.mappers.inventory_mapper import to_inventory, to_transaction_response
from till.application.metrics.transactions import (
    record_transaction_completed,
    record_transaction_rejected,
)
from till.application.use_cases.context import TraceContext
from till.domain.common.ids import RegisterId
from till.domain.register.cash_register import CashRegister
from till.domain.register.errors import TransactionError

logger = logging.getLogger(__name__)
_tracer = trace.get_tracer(__name__)


class PerformTransaction:
    def __init__(self, register: CashRegister, register_id: RegisterId) -> None:
        self._register = register
        self._register_id = register_id

    def execute(
        self,
        request_dto: TransactionRequest,
        trace_ctx: TraceContext,
    ) -> TransactionResponse:
        amount_paid = to_inventory(request_dto)

        with _tracer.start_as_current_span("till.perform_transaction") as span:
            span.set_attribute("till.register_id", str(self._register_id))
            span.set_attribute("till.price_cents", request_dto.price_cents)
            span.set_attribute("till.paid_cents", amount_paid.total)
            try:
                change = self._register.perform_transaction(request_dto.price_cents, amount_paid)
            except TransactionError as exc:
                span.set_attribute("till.rejected_reason", exc.reason.value)
                record_transaction_rejected(self._register_id, exc.reason)
                logger.warning(
                    "transaction_rejected",
                    extra={
                        "register_id": str(self._register_id),
                        "trace_id": trace_ctx.trace_id,
                        "request_id": trace_ctx.request_id,
                        "reason": exc.reason.value,
                        "price_cents": request_dto.price_cents,
                        "paid_cents": amount_paid.total,
                    },
                )
                raise

            span.set_attribute("till.change_cents", change.total)

        record_transaction_completed(
            self._register_id,
            change_cents=change.total,
            register_total_cents=self._register.total,
        )
        logger.info(
            "transaction_complete",
            extra={
                "register_id": str(self._register_id),
                "trace_id": trace_ctx.trace_id,
                "request_id": trace_ctx.request_id,
                "price_cents": request_dto.price_cents,
                "paid_cents": amount_paid.total,
                "change_cents": change.total,
            },
        )
        return to_transaction_response(
            register_id=self._register_id,
            price_cents=request_dto.price_cents,
            paid=amount_paid,
            change=change,
        )
