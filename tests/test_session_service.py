"""Tests for session registration."""

from datetime import timedelta

import pytest

from studio_tracker.domain.errors import NotFoundError, ValidationError
from studio_tracker.domain.sessions import SessionStatus
from studio_tracker.services.records import StudioRecords
from studio_tracker.services.sessions import SessionService
from tests.conftest import NOW, TODAY, FixedClock, make_sold


def test_create_session_for_today(records: StudioRecords, clock: FixedClock) -> None:
    service = SessionService(records, clock)

    session = service.create_session("Ramon", "  Ana Paula ")

    assert session.id == str(int(NOW.timestamp() * 1000))
    assert session.model == "Ana Paula"
    assert session.date == TODAY
    assert session.status is SessionStatus.PENDING
    assert service.list_sessions() == [session]


def test_session_ids_stay_unique_within_same_millisecond(
    records: StudioRecords, clock: FixedClock
) -> None:
    service = SessionService(records, clock)

    first = service.create_session("Ramon", "Ana")
    second = service.create_session("Anne", "Bia")
    clock.now = NOW - timedelta(seconds=1)
    third = service.create_session("Anne", "Carla")

    assert int(first.id) < int(second.id) < int(third.id)


@pytest.mark.parametrize(
    ("photographer", "model"),
    [("", "Ana"), ("Ramon", "   "), ("Unknown", "Ana"), ("ramon", "Ana")],
)
def test_create_session_rejects_invalid_input(
    records: StudioRecords, clock: FixedClock, photographer: str, model: str
) -> None:
    service = SessionService(records, clock)

    with pytest.raises(ValidationError):
        service.create_session(photographer, model)

    assert service.list_sessions() == []


def test_delete_session_keeps_sale(records: StudioRecords, clock: FixedClock) -> None:
    service = SessionService(records, clock)
    session = service.create_session("Ramon", "Ana")
    records.save_sales([make_sold(session.id, "Ingrid", 100)])

    service.delete_session(session.id)

    assert service.list_sessions() == []
    assert len(records.load_sales()) == 1
    with pytest.raises(NotFoundError):
        service.delete_session(session.id)
