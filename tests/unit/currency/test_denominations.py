from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from till.domain.currency.denominations import (
    Bill,
    Coin,
    UnknownDenominationError,
    all_elements,
    element_by_name,
    element_key,
)


def test_all_elements_covers_every_bill_and_coin_once() -> None:
    elements = all_elements()

    assert len(elements) == len(Bill) + len(Coin)
    assert len(set(elements)) == len(elements)


def test_all_elements_ordered_by_value_descending() -> None:
    values = [element.minor_value for element in all_elements()]

    assert values == sorted(values, reverse=True)
    assert all_elements()[0] is Bill.FIVE_HUNDRED_EURO
    assert all_elements()[-1] is Coin.ONE_CENT


def test_minor_values_are_cents() -> None:
    assert Bill.TWENTY_EURO.minor_value == 2000
    assert Coin.TWO_EURO.minor_value == 200
    assert Coin.FIFTY_CENT.minor_value == 50
    assert all(element.minor_value > 0 for element in all_elements())


def test_element_by_name_resolves_bills_and_coins() -> None:
    assert element_by_name("TEN_EURO") is Bill.TEN_EURO
    assert element_by_name("TWENTY_CENT") is Coin.TWENTY_CENT


def test_element_by_name_rejects_unknown_name() -> None:
    with pytest.raises(UnknownDenominationError):
        element_by_name("THREE_EURO")


def test_element_key_includes_family() -> None:
    assert element_key(Bill.FIVE_EURO) == "bill:FIVE_EURO"
    assert element_key(Coin.ONE_EURO) == "coin:ONE_EURO"
