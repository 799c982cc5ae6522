"""Domain models for daily statistics."""

from dataclasses import dataclass
from datetime import date

from studio_tracker.domain.sales import Sale
from studio_tracker.domain.sessions import SessionRecord


@dataclass(frozen=True)
class StudioSnapshot:
    """Everything the aggregation functions read, loaded in one pass."""

    sessions: list[SessionRecord]
    sales: list[Sale]
    photographers: list[str]
    sellers: list[str]
    daily_goal: float = 0.0


@dataclass(frozen=True)
class PhotographerTotals:
    """Today's revenue and folder count for a photographer."""

    name: str
    revenue: float
    folders: int


@dataclass(frozen=True)
class SellerTotals:
    """Today's revenue and sale count for a seller."""

    name: str
    revenue: float
    count: int


@dataclass(frozen=True)
class PersonProgress:
    """Progress of one roster member towards their share of the goal."""

    name: str
    revenue: float
    goal: float
    progress_percent: float
    remaining: float


@dataclass(frozen=True)
class GoalProgress:
    """Studio-wide progress towards the daily goal."""

    goal: float
    current_revenue: float
    remaining: float
    pending_sessions: int
    suggestion_per_pending: float
    goal_per_seller: float
    goal_per_photographer: float
    progress_percent: float
    sellers: list[PersonProgress]
    photographers: list[PersonProgress]


@dataclass(frozen=True)
class StatusTally:
    """Counts of today's sale outcomes and today's sessions."""

    vd_count: int
    d_count: int
    nv_count: int
    total_sessions: int


@dataclass(frozen=True)
class TopSale:
    """A high-value sale joined with its session."""

    seller: str
    value: float
    model: str
    photographer: str


@dataclass(frozen=True)
class Rankings:
    """Leaderboards for the day."""

    photographers_by_folders: list[PhotographerTotals]
    photographers_by_revenue: list[PhotographerTotals]
    sellers_by_count: list[SellerTotals]
    sellers_by_revenue: list[SellerTotals]
    top_sales: list[TopSale]
    status_tally: StatusTally


@dataclass(frozen=True)
class DaySummary:
    """Headline numbers for the day."""

    day: date
    sessions_count: int
    sales_count: int
    revenue: float
    sold_count: int
