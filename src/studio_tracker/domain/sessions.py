"""Domain models for photo sessions."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class SessionStatus(Enum):
    """Progress of a session, driven by the recorded sale."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class SessionRecord:
    """A booked photo shoot."""

    id: str
    photographer: str
    model: str
    date: date
    status: SessionStatus = SessionStatus.PENDING
