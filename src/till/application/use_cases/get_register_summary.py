from __future__ import annotations

from till.application.dto.responses import RegisterSummaryResponse
from till.application.mappers.inventory_mapper import to_inventory_response
from till.application.metrics.transactions import record_register_total
from till.domain.common.ids import RegisterId
from till.domain.register.cash_register import CashRegister


class GetRegisterSummary:
    def __init__(self, register: CashRegister, register_id: RegisterId) -> None:
        self._register = register
        self._register_id = register_id

    def execute(self) -> RegisterSummaryResponse:
        holdings = self._register.holdings
        record_register_total(self._register_id, holdings.total)
        return RegisterSummaryResponse(
            registerId=str(self._register_id),
            holdings=to_inventory_response(holdings),
        )
