"""Deposit request validation — positive amounts in whole cents."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledger.schemas.balance import DepositRequest
from ledger.schemas.report import ClientSpendResponse
from ledger.services.reporting_engine import ClientSpend


def test_accepts_positive_cents():
    assert DepositRequest(amount="12.34").amount == Decimal("12.34")


def test_accepts_integers():
    assert DepositRequest(amount=5).amount == Decimal("5")


@pytest.mark.parametrize("amount", [0, -1, "-0.01"])
def test_rejects_non_positive(amount):
    with pytest.raises(ValidationError):
        DepositRequest(amount=amount)


def test_rejects_sub_cent_precision():
    with pytest.raises(ValidationError):
        DepositRequest(amount="0.001")


def test_rejects_non_numeric():
    with pytest.raises(ValidationError):
        DepositRequest(amount="lots")


def test_client_spend_serializes_full_name_in_camel_case():
    row = ClientSpend(id=4, full_name="Ash Kethcum", paid=Decimal("2020.00"))

    dumped = ClientSpendResponse.model_validate(row).model_dump(by_alias=True)

    assert dumped == {"id": 4, "fullName": "Ash Kethcum", "paid": Decimal("2020.00")}
