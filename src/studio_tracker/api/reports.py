"""Endpoints for rankings, goals and text reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

if TYPE_CHECKING:
    from studio_tracker.containers import AppContainer

router = APIRouter(tags=["reports"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/stats/rankings")
async def rankings(request: Request) -> dict[str, object]:
    """Return today's leaderboards and status tally."""
    return {"rankings": _container(request).stats_service.get_rankings()}


@router.get("/stats/goals")
async def goals(request: Request) -> dict[str, object]:
    """Return progress towards the daily goal."""
    return {"goals": _container(request).stats_service.get_goal_progress()}


@router.get("/stats/summary")
async def summary(request: Request) -> dict[str, object]:
    """Return the day's headline numbers."""
    return {"summary": _container(request).stats_service.get_day_summary()}


@router.get("/reports/partial", response_class=PlainTextResponse)
async def partial(request: Request) -> str:
    """Return the in-progress ranking report as plain text."""
    return _container(request).stats_service.get_partial_report()


@router.get("/reports/final", response_class=PlainTextResponse)
async def final(request: Request) -> str:
    """Return the end-of-day revenue report as plain text."""
    return _container(request).stats_service.get_final_report()
