"""Studio-wide settings: the daily goal and data resets."""

import logging
import math
from dataclasses import dataclass, field

from studio_tracker.domain.errors import ValidationError
from studio_tracker.services.records import StudioRecords

_logger = logging.getLogger(__name__)


@dataclass
class StudioSettingsService:
    """Service for the daily goal and for wiping stored data."""

    records: StudioRecords
    default_photographers: list[str] = field(default_factory=list)
    default_sellers: list[str] = field(default_factory=list)

    def get_daily_goal(self) -> float:
        """Return the daily goal, or 0 when none is set."""
        return self.records.load_daily_goal()

    def set_daily_goal(self, goal: float) -> None:
        """Persist a non-negative daily goal."""
        if not math.isfinite(goal) or goal < 0:
            raise ValidationError("Enter a valid value for the goal.")
        self.records.save_daily_goal(goal)
        _logger.info("Daily goal set: %.2f", goal)

    def ensure_defaults(self) -> None:
        """Seed the rosters on first run."""
        if self.records.load_photographers() is None:
            self.records.save_photographers(self.default_photographers)
        if self.records.load_sellers() is None:
            self.records.save_sellers(self.default_sellers)

    def clear_all_data(self) -> None:
        """Wipe every collection and reseed the default rosters."""
        self.records.clear()
        self.ensure_defaults()
        _logger.info("All studio data cleared")
