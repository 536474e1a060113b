from __future__ import annotations

from till.application.dto.requests import TransactionRequest
from till.application.dto.responses import (
    DenominationCountResponse,
    InventoryResponse,
    TransactionResponse,
)
from till.domain.common.ids import RegisterId
from till.domain.currency.denominations import Bill, element_by_name, element_key
from till.domain.register.inventory import Inventory


def to_inventory(request_dto: TransactionRequest) -> Inventory:
    inventory = Inventory()
    for line in request_dto.tendered:
        inventory.add(element_by_name(line.denomination), line.count)
    return inventory


def to_inventory_response(inventory: Inventory) -> InventoryResponse:
    return InventoryResponse(
        lines=[
            DenominationCountResponse(
                denomination=element.name,
                key=element_key(element),
                kind="bill" if isinstance(element, Bill) else "coin",
                minorValue=element.minor_value,
                count=count,
            )
            for element, count in inventory.items()
        ],
        totalCents=inventory.total,
    )


def to_transaction_response(
    register_id: RegisterId,
    price_cents: int,
    paid: Inventory,
    change: Inventory,
) -> TransactionResponse:
    return TransactionResponse(
        registerId=str(register_id),
        priceCents=price_cents,
        paidCents=paid.total,
        change=to_inventory_response(change),
    )
