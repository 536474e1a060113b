from __future__ import annotations

from pydantic import BaseModel, Field


class DenominationCountResponse(BaseModel):
    denomination: str
    key: str
    kind: str
    minorValue: int
    count: int


class InventoryResponse(BaseModel):
    lines: list[DenominationCountResponse] = Field(default_factory=list)
    totalCents: int


class TransactionResponse(BaseModel):
    registerId: str
    priceCents: int
    paidCents: int
    change: InventoryResponse


class RegisterSummaryResponse(BaseModel):
    registerId: str
    holdings: InventoryResponse
