"""Reporting Engine — best profession and best clients over [start, end)."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from ledger.core.report_window import PaymentWindow
from ledger.services.reporting_engine import ClientSpend, ReportingEngine
from tests.services.factories import add_job, add_pair

AUGUST = PaymentWindow.of(
    datetime(2020, 8, 1, tzinfo=timezone.utc),
    datetime(2020, 9, 1, tzinfo=timezone.utc),
)


def _at(day: int, hour: int = 12) -> datetime:
    return datetime(2020, 8, day, hour, tzinfo=timezone.utc)


async def test_best_profession_picks_highest_earnings(test_db):
    programmer = await add_pair(test_db, profession="Programmer")
    designer = await add_pair(test_db, profession="Designer")
    await add_job(test_db, programmer, "100", paid_at=_at(3))
    await add_job(test_db, programmer, "200", paid_at=_at(4))
    await add_job(test_db, designer, "250", paid_at=_at(5))

    engine = ReportingEngine(test_db)

    assert await engine.best_profession(AUGUST) == "Programmer"
    assert await engine.profession_earnings(AUGUST) == {
        "Programmer": Decimal("300.00"), "Designer": Decimal("250.00"),
    }


async def test_best_profession_tie_goes_to_first_name_alphabetically(test_db):
    zoo = await add_pair(test_db, profession="Zookeeper")
    art = await add_pair(test_db, profession="Artist")
    await add_job(test_db, zoo, "100", paid_at=_at(3))
    await add_job(test_db, art, "100", paid_at=_at(3))

    assert await ReportingEngine(test_db).best_profession(AUGUST) == "Artist"


async def test_unpaid_jobs_are_ignored(test_db):
    programmer = await add_pair(test_db, profession="Programmer")
    designer = await add_pair(test_db, profession="Designer")
    await add_job(test_db, programmer, "100", paid_at=_at(3))
    await add_job(test_db, designer, "5000")

    assert await ReportingEngine(test_db).best_profession(AUGUST) == "Programmer"


async def test_empty_window_yields_no_result(seeded):
    window = PaymentWindow.of(
        datetime(2021, 1, 1, tzinfo=timezone.utc),
        datetime(2021, 2, 1, tzinfo=timezone.utc),
    )
    engine = ReportingEngine(seeded)

    assert await engine.best_profession(window) is None
    assert await engine.best_clients(window) == []


async def test_seeded_best_profession(seeded):
    engine = ReportingEngine(seeded)

    assert await engine.best_profession(AUGUST) == "Programmer"
    earnings = await engine.profession_earnings(AUGUST)
    assert earnings["Programmer"] == Decimal("2683.00")
    assert earnings["Musician"] == Decimal("221.00")
    assert earnings["Fighter"] == Decimal("200.00")


async def test_seeded_best_clients_default_limit(seeded):
    clients = await ReportingEngine(seeded).best_clients(AUGUST)

    assert clients == [
        ClientSpend(id=4, full_name="Ash Kethcum", paid=Decimal("2020.00")),
        ClientSpend(id=1, full_name="Harry Potter", paid=Decimal("442.00")),
    ]


async def test_best_clients_tie_goes_to_lower_id(seeded):
    clients = await ReportingEngine(seeded).best_clients(AUGUST, limit=3)

    # Clients 1 and 2 both paid 442
    assert [c.id for c in clients] == [4, 1, 2]


async def test_best_clients_limit_larger_than_population(seeded):
    clients = await ReportingEngine(seeded).best_clients(AUGUST, limit=100)

    assert [c.id for c in clients] == [4, 1, 2, 3]


async def test_single_day_window(seeded):
    window = PaymentWindow.of(
        datetime(2020, 8, 17, tzinfo=timezone.utc),
        datetime(2020, 8, 18, tzinfo=timezone.utc),
    )
    engine = ReportingEngine(seeded)

    # Fighter and Musician both earned 200
    assert await engine.best_profession(window) == "Fighter"
    assert [c.id for c in await engine.best_clients(window)] == [1, 3]


async def test_window_start_is_inclusive_end_is_exclusive(seeded):
    start = datetime(2020, 8, 15, 19, 11, 26, 737000, tzinfo=timezone.utc)
    end = datetime(2020, 8, 16, 19, 11, 26, 737000, tzinfo=timezone.utc)
    engine = ReportingEngine(seeded)

    clients = await engine.best_clients(PaymentWindow.of(start, end), limit=10)
    assert [(c.id, c.paid) for c in clients] == [
        (4, Decimal("2020.00")), (1, Decimal("221.00")), (2, Decimal("121.00")),
    ]

    widened = PaymentWindow.of(start, end + timedelta(microseconds=1))
    clients = await engine.best_clients(widened, limit=10)
    assert [(c.id, c.paid) for c in clients] == [
        (4, Decimal("2020.00")), (2, Decimal("321.00")), (1, Decimal("221.00")),
    ]


async def test_reports_are_deterministic(seeded):
    engine = ReportingEngine(seeded)

    first = await engine.best_clients(AUGUST, limit=4)
    second = await engine.best_clients(AUGUST, limit=4)

    assert first == second
