from __future__ import annotations

from typing import Iterator

from till.domain.currency.denominations import MonetaryElement, catalog_position
from till.domain.register.errors import InventoryInvariantError


class Inventory:
    """Counts of bills and coins held together, e.g. a till drawer or a tender.

    Entries that drop to zero are removed, so two inventories holding the same
    pieces always compare equal.
    """

    def __init__(self) -> None:
        self._counts: dict[MonetaryElement, int] = {}
        self._total = 0

    @classmethod
    def none(cls) -> Inventory:
        return cls()

    @property
    def total(self) -> int:
        return self._total

    def add(self, element: MonetaryElement, count: int) -> Inventory:
        if count == 0:
            return self
        updated = self._counts.get(element, 0) + count
        if updated:
            self._counts[element] = updated
        else:
            self._counts.pop(element, None)
        self._total += element.minor_value * count
        return self

    def remove(self, element: MonetaryElement, count: int) -> Inventory:
        current = self._counts.get(element, 0)
        if current < count:
            raise InventoryInvariantError(
                f"cannot remove {count} x {element.name}, only {current} held"
            )
        remaining = current - count
        if remaining:
            self._counts[element] = remaining
        else:
            self._counts.pop(element, None)
        self._total -= element.minor_value * count
        return self

    def merge(self, other: Inventory) -> Inventory:
        for element, count in other.items():
            self.add(element, count)
        return self

    def get_count(self, element: MonetaryElement) -> int:
        return self._counts.get(element, 0)

    def get_elements(self) -> list[MonetaryElement]:
        return sorted(self._counts, key=catalog_position)

    def items(self) -> Iterator[tuple[MonetaryElement, int]]:
        for element in self.get_elements():
            yield element, self._counts[element]

    def is_empty(self) -> bool:
        return not self._counts

    def copy(self) -> Inventory:
        return Inventory().merge(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(f"{element.name}: {count}" for element, count in self.items())
        return f"Inventory({{{entries}}}, total={self._total})"
