from __future__ import annotations

from enum import Enum
from typing import Union


class Bill(Enum):
    FIVE_HUNDRED_EURO = 50000
    TWO_HUNDRED_EURO = 20000
    ONE_HUNDRED_EURO = 10000
    FIFTY_EURO = 5000
    TWENTY_EURO = 2000
    TEN_EURO = 1000
    FIVE_EURO = 500

    @property
    def minor_value(self) -> int:
        return self.value


class Coin(Enum):
    TWO_EURO = 200
    ONE_EURO = 100
    FIFTY_CENT = 50
    TWENTY_CENT = 20
    TEN_CENT = 10
    FIVE_CENT = 5
    TWO_CENT = 2
    ONE_CENT = 1

    @property
    def minor_value(self) -> int:
        return self.value


MonetaryElement = Union[Bill, Coin]

_FAMILY_RANK = {Bill: 0, Coin: 1}

_ALL_ELEMENTS: tuple[MonetaryElement, ...] = tuple(
    sorted(
        [*Bill, *Coin],
        key=lambda element: (-element.minor_value, _FAMILY_RANK[type(element)]),
    )
)

_BY_NAME: dict[str, MonetaryElement] = {element.name: element for element in _ALL_ELEMENTS}
_POSITION: dict[MonetaryElement, int] = {
    element: index for index, element in enumerate(_ALL_ELEMENTS)
}


class UnknownDenominationError(ValueError):
    pass


def all_elements() -> tuple[MonetaryElement, ...]:
    """Every bill and coin, largest minor value first."""
    return _ALL_ELEMENTS


def element_by_name(name: str) -> MonetaryElement:
    element = _BY_NAME.get(name)
    if element is None:
        raise UnknownDenominationError(f"unknown denomination: {name}")
    return element


def element_key(element: MonetaryElement) -> str:
    family = "bill" if isinstance(element, Bill) else "coin"
    return f"{family}:{element.name}"


def catalog_position(element: MonetaryElement) -> int:
    return _POSITION[element]
