"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - to_money quantizes to cents without float drift
    - Enums have expected members and compare equal to their DB strings
"""

from decimal import Decimal

from ledger.core.domain_types import (
    ContractId, JobId, ProfileId,
    ContractStatus, DepositOutcome, PaymentOutcome, ProfileRole,
    to_money,
)


def test_identity_types_wrap_int():
    assert ProfileId(1) == 1
    assert ContractId(2) == 2
    assert JobId(3) == 3


def test_to_money_quantizes_to_cents():
    assert to_money("451.3") == Decimal("451.30")
    assert to_money(Decimal("1.005")) == Decimal("1.01")
    assert to_money(0) == Decimal("0.00")
    assert str(to_money("200")) == "200.00"


def test_contract_status_has_three_states():
    assert {s.value for s in ContractStatus} == {"new", "in_progress", "terminated"}


def test_enums_compare_equal_to_db_strings():
    assert ContractStatus.TERMINATED == "terminated"
    assert ProfileRole.CLIENT == "client"
    assert ProfileRole.CONTRACTOR == "contractor"


def test_outcomes_serialize_to_status_strings():
    assert PaymentOutcome.PAID.value == "paid"
    assert PaymentOutcome.ALREADY_PAID.value == "already_paid"
    assert DepositOutcome.DEPOSITED.value == "deposited"
