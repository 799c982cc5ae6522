"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from studio_tracker.config import Settings
from studio_tracker.containers import AppContainer, build_container
from studio_tracker.domain.sales import (
    ClientContact,
    DeclinedSale,
    DeliveryType,
    NoShowSale,
    PaymentEntry,
    PaymentMethod,
    SoldSale,
)
from studio_tracker.domain.sessions import SessionRecord
from studio_tracker.domain.stats import StudioSnapshot
from studio_tracker.services.records import RecordStore, StudioRecords

TZ = ZoneInfo("America/Sao_Paulo")
NOW = datetime(2024, 5, 10, 14, 30, tzinfo=TZ)
TODAY = NOW.date()
YESTERDAY = TODAY - timedelta(days=1)


@dataclass
class InMemoryRecordStore(RecordStore):
    """In-memory record store for tests."""

    values: dict[str, object] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get(self, name: str) -> object | None:
        return self.values.get(name)

    def set(self, name: str, value: object) -> None:
        self.writes.append(name)
        self.values[name] = value

    def clear(self) -> None:
        self.values.clear()


@dataclass
class FixedClock:
    """Clock returning a settable instant."""

    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now


def make_session(
    session_id: str,
    photographer: str,
    model: str = "Modelo",
    day: date = TODAY,
) -> SessionRecord:
    return SessionRecord(
        id=session_id, photographer=photographer, model=model, date=day
    )


def make_sold(
    session_id: str,
    seller: str,
    value: float,
    method: PaymentMethod = PaymentMethod.PIX,
    at: datetime = NOW,
) -> SoldSale:
    return SoldSale(
        session_id=session_id,
        seller=seller,
        delivery_type=DeliveryType.SELECTED,
        payments=(PaymentEntry(method=method, value=value),),
        timestamp=at,
    )


def make_declined(session_id: str, seller: str, at: datetime = NOW) -> DeclinedSale:
    return DeclinedSale(
        session_id=session_id,
        seller=seller,
        delivery_type=DeliveryType.COURTESY,
        timestamp=at,
    )


def make_no_show(session_id: str, at: datetime = NOW) -> NoShowSale:
    return NoShowSale(session_id=session_id, timestamp=at, client=ClientContact())


def make_snapshot(**overrides: object) -> StudioSnapshot:
    values: dict[str, object] = {
        "sessions": [],
        "sales": [],
        "photographers": ["Ramon", "Anne"],
        "sellers": ["Ingrid", "Wiliam"],
        "daily_goal": 0.0,
    }
    values.update(overrides)
    return StudioSnapshot(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(record_store="file", record_store_path="unused.json")


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore(
        values={
            "photographers": ["Ramon", "Anne", "Gabriel", "Fabricio"],
            "sellers": ["Ingrid", "Wiliam"],
        }
    )


@pytest.fixture
def records(store: InMemoryRecordStore) -> StudioRecords:
    return StudioRecords(store)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def container(
    settings: Settings, store: InMemoryRecordStore, clock: FixedClock
) -> AppContainer:
    return build_container(settings, store=store, clock=clock)
