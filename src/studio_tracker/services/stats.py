"""Read-side service exposing today's statistics and reports."""

from dataclasses import dataclass
from datetime import date

from studio_tracker.domain.stats import DaySummary, GoalProgress, Rankings
from studio_tracker.services.aggregation import (
    build_rankings,
    day_summary,
    goal_progress,
)
from studio_tracker.services.clock import Clock
from studio_tracker.services.records import StudioRecords
from studio_tracker.services.reports import (
    DEFAULT_STUDIO_NAME,
    final_report,
    partial_report,
)


@dataclass
class StatsService:
    """Loads a snapshot and runs the aggregation for the local day."""

    records: StudioRecords
    clock: Clock
    studio_name: str = DEFAULT_STUDIO_NAME

    def today(self) -> date:
        return self.clock().date()

    def get_rankings(self) -> Rankings:
        return build_rankings(self.records.snapshot(), self.today())

    def get_goal_progress(self) -> GoalProgress:
        return goal_progress(self.records.snapshot(), self.today())

    def get_day_summary(self) -> DaySummary:
        return day_summary(self.records.snapshot(), self.today())

    def get_partial_report(self) -> str:
        """Return the in-progress report stamped with the current time."""
        now = self.clock()
        return partial_report(
            self.records.snapshot(),
            now.date(),
            now.time(),
            studio_name=self.studio_name,
        )

    def get_final_report(self) -> str:
        return final_report(
            self.records.snapshot(), self.today(), studio_name=self.studio_name
        )
