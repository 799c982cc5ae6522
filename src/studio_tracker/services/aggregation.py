"""Daily aggregation over sessions and sales.

All functions are pure: they take a ``StudioSnapshot`` and the caller's
``today`` and never read the clock or the record store.
"""

from datetime import date

from studio_tracker.domain.sales import Sale, SaleStatus
from studio_tracker.domain.sessions import SessionRecord
from studio_tracker.domain.stats import (
    DaySummary,
    GoalProgress,
    PersonProgress,
    PhotographerTotals,
    Rankings,
    SellerTotals,
    StatusTally,
    StudioSnapshot,
    TopSale,
)

TOP_SALES_LIMIT = 3
MISSING_SESSION_LABEL = "N/A"


def today_sessions(sessions: list[SessionRecord], today: date) -> list[SessionRecord]:
    """Return sessions attributed to ``today``."""
    return [session for session in sessions if session.date == today]


def today_sales(sales: list[Sale], today: date) -> list[Sale]:
    """Return sales whose timestamp falls on ``today``."""
    return [sale for sale in sales if sale.timestamp.date() == today]


def pending_sessions(snapshot: StudioSnapshot, today: date) -> list[SessionRecord]:
    """Return today's sessions that have no sale of any status."""
    with_sale = {sale.session_id for sale in snapshot.sales}
    return [
        session
        for session in today_sessions(snapshot.sessions, today)
        if session.id not in with_sale
    ]


def photographer_totals(
    snapshot: StudioSnapshot, today: date
) -> list[PhotographerTotals]:
    """Return revenue and folder count per photographer, in roster order."""
    sessions_today = today_sessions(snapshot.sessions, today)
    sales_today = today_sales(snapshot.sales, today)
    photographer_by_session = {
        session.id: session.photographer for session in snapshot.sessions
    }
    totals = []
    for name in snapshot.photographers:
        revenue = sum(
            (
                sale.sale_value
                for sale in sales_today
                if photographer_by_session.get(sale.session_id) == name
            ),
            0.0,
        )
        folders = sum(1 for session in sessions_today if session.photographer == name)
        totals.append(PhotographerTotals(name=name, revenue=revenue, folders=folders))
    return totals


def seller_totals(snapshot: StudioSnapshot, today: date) -> list[SellerTotals]:
    """Return revenue and sale count per seller, in roster order."""
    sales_today = today_sales(snapshot.sales, today)
    totals = []
    for name in snapshot.sellers:
        seller_sales = [sale for sale in sales_today if sale.seller == name]
        totals.append(
            SellerTotals(
                name=name,
                revenue=total_revenue(seller_sales),
                count=len(seller_sales),
            )
        )
    return totals


def total_revenue(sales: list[Sale]) -> float:
    """Sum of sale values."""
    return sum((sale.sale_value for sale in sales), 0.0)


def goal_progress(snapshot: StudioSnapshot, today: date) -> GoalProgress:
    """Return progress towards the daily goal overall and per person."""
    goal = snapshot.daily_goal
    current_revenue = total_revenue(today_sales(snapshot.sales, today))
    pending_count = len(pending_sessions(snapshot, today))
    goal_per_seller = goal / max(len(snapshot.sellers), 1)
    goal_per_photographer = goal / max(len(snapshot.photographers), 1)
    remaining = goal - current_revenue
    suggestion = remaining / pending_count if pending_count > 0 else 0.0

    return GoalProgress(
        goal=goal,
        current_revenue=current_revenue,
        remaining=remaining,
        pending_sessions=pending_count,
        suggestion_per_pending=suggestion,
        goal_per_seller=goal_per_seller,
        goal_per_photographer=goal_per_photographer,
        progress_percent=_percent(current_revenue, goal),
        sellers=[
            _person_progress(totals.name, totals.revenue, goal_per_seller)
            for totals in seller_totals(snapshot, today)
        ],
        photographers=[
            _person_progress(totals.name, totals.revenue, goal_per_photographer)
            for totals in photographer_totals(snapshot, today)
        ],
    )


def status_tally(snapshot: StudioSnapshot, today: date) -> StatusTally:
    """Count today's sales per outcome alongside today's session count."""
    sales_today = today_sales(snapshot.sales, today)
    return StatusTally(
        vd_count=_count_status(sales_today, SaleStatus.SOLD),
        d_count=_count_status(sales_today, SaleStatus.DECLINED),
        nv_count=_count_status(sales_today, SaleStatus.NOT_SEEN),
        total_sessions=len(today_sessions(snapshot.sessions, today)),
    )


def top_sales(
    snapshot: StudioSnapshot, today: date, limit: int = TOP_SALES_LIMIT
) -> list[TopSale]:
    """Return today's highest-value sales joined with their sessions."""
    sessions_by_id = {session.id: session for session in snapshot.sessions}
    ranked = sorted(
        today_sales(snapshot.sales, today),
        key=lambda sale: sale.sale_value,
        reverse=True,
    )
    result = []
    for sale in ranked[:limit]:
        session = sessions_by_id.get(sale.session_id)
        result.append(
            TopSale(
                seller=sale.seller,
                value=sale.sale_value,
                model=session.model if session else MISSING_SESSION_LABEL,
                photographer=(
                    session.photographer if session else MISSING_SESSION_LABEL
                ),
            )
        )
    return result


def build_rankings(snapshot: StudioSnapshot, today: date) -> Rankings:
    """Return all of today's leaderboards.

    Every ranking sorts on a single metric, descending. ``sorted`` is stable,
    so entries with equal metrics keep roster order.
    """
    photographers = photographer_totals(snapshot, today)
    sellers = seller_totals(snapshot, today)
    return Rankings(
        photographers_by_folders=sorted(
            photographers, key=lambda item: item.folders, reverse=True
        ),
        photographers_by_revenue=sorted(
            photographers, key=lambda item: item.revenue, reverse=True
        ),
        sellers_by_count=sorted(sellers, key=lambda item: item.count, reverse=True),
        sellers_by_revenue=sorted(
            sellers, key=lambda item: item.revenue, reverse=True
        ),
        top_sales=top_sales(snapshot, today),
        status_tally=status_tally(snapshot, today),
    )


def day_summary(snapshot: StudioSnapshot, today: date) -> DaySummary:
    """Return headline counts and revenue for ``today``."""
    sales_today = today_sales(snapshot.sales, today)
    return DaySummary(
        day=today,
        sessions_count=len(today_sessions(snapshot.sessions, today)),
        sales_count=len(sales_today),
        revenue=total_revenue(sales_today),
        sold_count=_count_status(sales_today, SaleStatus.SOLD),
    )


def _person_progress(name: str, revenue: float, goal: float) -> PersonProgress:
    return PersonProgress(
        name=name,
        revenue=revenue,
        goal=goal,
        progress_percent=_percent(revenue, goal),
        remaining=max(goal - revenue, 0.0),
    )


def _percent(value: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return value * 100 / goal


def _count_status(sales: list[Sale], status: SaleStatus) -> int:
    return sum(1 for sale in sales if sale.status is status)
