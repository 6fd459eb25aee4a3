"""Entity Store — lookups, party filtering and guarded balance updates."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from ledger.core.domain_types import ContractStatus
from ledger.models import Contract, Profile
from ledger.services.entity_store import SqlEntityStore
from tests.services.factories import add_job, add_pair, balance_of, reload_job


async def test_find_profile(seeded):
    store = SqlEntityStore(seeded)

    profile = await store.find_profile(1)

    assert profile.full_name == "Harry Potter"
    assert profile.balance == Decimal("1150.00")
    assert await store.find_profile(999) is None


async def test_contract_visible_only_to_parties(seeded):
    store = SqlEntityStore(seeded)

    assert (await store.find_contract_for_profile(1, 1)).id == 1
    assert (await store.find_contract_for_profile(1, 5)).id == 1
    assert await store.find_contract_for_profile(1, 2) is None
    assert await store.find_contract_for_profile(999, 1) is None


async def test_active_contracts_exclude_terminated(seeded):
    store = SqlEntityStore(seeded)

    client_side = await store.find_contracts_for_profile(1, active_only=True)
    contractor_side = await store.find_contracts_for_profile(6, active_only=True)
    everything = await store.find_contracts_for_profile(1)

    assert [c.id for c in client_side] == [2]
    assert [c.id for c in contractor_side] == [2, 3, 8]
    assert [c.id for c in everything] == [1, 2]


async def test_unpaid_jobs_on_active_contracts(seeded):
    store = SqlEntityStore(seeded)

    assert [j.id for j in await store.find_unpaid_jobs_for_profile(1)] == [2]
    assert [j.id for j in await store.find_unpaid_jobs_for_profile(2)] == [3, 4]
    assert [j.id for j in await store.find_unpaid_jobs_for_profile(7)] == [4, 5]
    assert await store.find_unpaid_jobs_for_profile(999) == []


async def test_find_job_for_update_loads_parties(seeded):
    job = await SqlEntityStore(seeded).find_job_for_update(2)

    assert job.contract.id == 2
    assert job.contract.client.id == 1
    assert job.contract.contractor.id == 6


async def test_sum_unpaid_debt(seeded):
    store = SqlEntityStore(seeded)

    assert await store.sum_unpaid_debt(1) == Decimal("201.00")
    assert await store.sum_unpaid_debt(2) == Decimal("402.00")
    assert await store.sum_unpaid_debt(3) == Decimal("0.00")


async def test_increment_balance_applies_delta(test_db):
    contract = await add_pair(test_db, client_balance="10.50")
    client_id = contract.client_id
    store = SqlEntityStore(test_db)

    assert await store.increment_balance(client_id, Decimal("4.50")) == Decimal("15.00")
    assert await store.increment_balance(client_id, Decimal("-15")) == Decimal("0.00")
    await test_db.commit()
    assert await balance_of(test_db, client_id) == Decimal("0.00")


async def test_debit_beyond_balance_matches_nothing(test_db):
    contract = await add_pair(test_db, client_balance="10")
    client_id = contract.client_id
    store = SqlEntityStore(test_db)

    assert await store.increment_balance(client_id, Decimal("-10.01")) is None
    assert await store.increment_balance(999, Decimal("1")) is None
    await test_db.commit()
    assert await balance_of(test_db, client_id) == Decimal("10.00")


async def test_mark_job_paid_only_once(test_db):
    contract = await add_pair(test_db)
    job = await add_job(test_db, contract, "40")
    job_id = job.id
    store = SqlEntityStore(test_db)
    paid_at = datetime(2021, 1, 1, tzinfo=timezone.utc)

    assert await store.mark_job_paid(job_id, paid_at) is True
    assert await store.mark_job_paid(job_id, paid_at) is False
    await test_db.commit()
    assert (await reload_job(test_db, job_id)).paid is True


async def test_find_job_and_contract_by_id(seeded):
    store = SqlEntityStore(seeded)

    job = await store.find_job(6)
    contract = await store.find_contract(7)

    assert job.price == Decimal("2020.00")
    assert job.paid is True
    assert contract.client_id == 4
    assert await store.find_job(999) is None
    assert await store.find_contract(999) is None


async def test_role_and_status_checks_follow_enums(test_db):
    test_db.add(Profile(
        first_name="Eve", last_name="X", profession="Spy",
        balance=Decimal("0"), role="admin",
    ))
    with pytest.raises(IntegrityError):
        await test_db.flush()
    await test_db.rollback()

    contract = await add_pair(test_db)
    await test_db.execute(
        update(Contract).where(Contract.id == contract.id)
        .values(status=ContractStatus.IN_PROGRESS.value),
    )
    await test_db.commit()
    with pytest.raises(IntegrityError):
        await test_db.execute(
            update(Contract).where(Contract.id == contract.id)
            .values(status="paused"),
        )
