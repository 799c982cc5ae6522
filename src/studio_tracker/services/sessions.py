"""Photo session registration."""

import logging
from dataclasses import dataclass

from studio_tracker.domain.errors import NotFoundError, ValidationError
from studio_tracker.domain.sessions import SessionRecord, SessionStatus
from studio_tracker.services.clock import Clock
from studio_tracker.services.records import StudioRecords

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Registers and removes photo sessions."""

    records: StudioRecords
    clock: Clock

    def list_sessions(self) -> list[SessionRecord]:
        return self.records.load_sessions()

    def create_session(self, photographer: str, model: str) -> SessionRecord:
        """Register a session for today with a rostered photographer."""
        model_name = model.strip()
        if not photographer or not model_name:
            _logger.warning("Rejected session: missing photographer or model")
            raise ValidationError("Select a photographer and enter the model name.")
        roster = self.records.load_photographers() or []
        if photographer not in roster:
            _logger.warning("Rejected session: unknown photographer=%s", photographer)
            raise ValidationError(f"Photographer '{photographer}' is not registered.")

        sessions = self.records.load_sessions()
        now = self.clock()
        session = SessionRecord(
            id=_next_session_id(int(now.timestamp() * 1000), sessions),
            photographer=photographer,
            model=model_name,
            date=now.date(),
            status=SessionStatus.PENDING,
        )
        self.records.save_sessions([*sessions, session])
        _logger.info(
            "Session created: id=%s photographer=%s", session.id, photographer
        )
        return session

    def delete_session(self, session_id: str) -> None:
        """Remove a session. A sale recorded for it is kept."""
        sessions = self.records.load_sessions()
        remaining = [session for session in sessions if session.id != session_id]
        if len(remaining) == len(sessions):
            raise NotFoundError(f"Session {session_id} not found.")
        self.records.save_sessions(remaining)
        _logger.info("Session deleted: id=%s", session_id)


def _next_session_id(millis: int, sessions: list[SessionRecord]) -> str:
    numeric_ids = [int(session.id) for session in sessions if session.id.isdigit()]
    if numeric_ids and millis <= max(numeric_ids):
        millis = max(numeric_ids) + 1
    return str(millis)
