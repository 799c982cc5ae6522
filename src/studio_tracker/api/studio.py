"""Endpoints that mutate studio records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from studio_tracker.api.models import (
    GoalRequest,
    NameRequest,
    SaleRequest,
    SessionCreateRequest,
)
from studio_tracker.domain.errors import NotFoundError
from studio_tracker.domain.sales import SaleDraft
from studio_tracker.services.records import sale_to_record, session_to_record

if TYPE_CHECKING:
    from studio_tracker.containers import AppContainer

router = APIRouter(tags=["studio"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/photographers")
async def list_photographers(request: Request) -> dict[str, object]:
    """Return the photographer roster."""
    roster = _container(request).roster_service
    return {"photographers": roster.list_photographers()}


@router.post("/photographers", status_code=status.HTTP_201_CREATED)
async def add_photographer(payload: NameRequest, request: Request) -> dict[str, object]:
    """Add a photographer to the roster."""
    roster = _container(request).roster_service
    return {"photographers": roster.add_photographer(payload.name)}


@router.delete("/photographers/{name}")
async def remove_photographer(name: str, request: Request) -> dict[str, object]:
    """Remove a photographer from the roster."""
    roster = _container(request).roster_service
    return {"photographers": roster.remove_photographer(name)}


@router.get("/sellers")
async def list_sellers(request: Request) -> dict[str, object]:
    """Return the seller roster."""
    return {"sellers": _container(request).roster_service.list_sellers()}


@router.post("/sellers", status_code=status.HTTP_201_CREATED)
async def add_seller(payload: NameRequest, request: Request) -> dict[str, object]:
    """Add a seller to the roster."""
    return {"sellers": _container(request).roster_service.add_seller(payload.name)}


@router.delete("/sellers/{name}")
async def remove_seller(name: str, request: Request) -> dict[str, object]:
    """Remove a seller from the roster."""
    return {"sellers": _container(request).roster_service.remove_seller(name)}


@router.get("/goal")
async def get_goal(request: Request) -> dict[str, float]:
    """Return the daily goal."""
    return {"goal": _container(request).studio_settings_service.get_daily_goal()}


@router.put("/goal")
async def set_goal(payload: GoalRequest, request: Request) -> dict[str, float]:
    """Set the daily goal."""
    service = _container(request).studio_settings_service
    service.set_daily_goal(payload.goal)
    return {"goal": service.get_daily_goal()}


@router.post("/reset")
async def reset(request: Request) -> dict[str, str]:
    """Clear all data and restore the default rosters."""
    _container(request).studio_settings_service.clear_all_data()
    return {"status": "ok"}


@router.get("/sessions")
async def list_sessions(request: Request) -> dict[str, object]:
    """Return every session with its sale, if any."""
    container = _container(request)
    sales = {sale.session_id: sale for sale in container.sale_service.list_sales()}
    return {
        "sessions": [
            {
                **session_to_record(session),
                "sale": sale_to_record(sales[session.id])
                if session.id in sales
                else None,
            }
            for session in container.session_service.list_sessions()
        ]
    }


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreateRequest, request: Request
) -> dict[str, object]:
    """Register a session for today."""
    session = _container(request).session_service.create_session(
        payload.photographer, payload.model
    )
    return session_to_record(session)


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, request: Request) -> dict[str, str]:
    """Delete a session."""
    _container(request).session_service.delete_session(session_id)
    return {"status": "ok"}


@router.get("/sales")
async def list_sales(request: Request) -> dict[str, object]:
    """Return every recorded sale."""
    sales = _container(request).sale_service.list_sales()
    return {"sales": [sale_to_record(sale) for sale in sales]}


@router.get("/sessions/{session_id}/sale")
async def get_sale(session_id: str, request: Request) -> dict[str, object]:
    """Return the sale recorded for a session."""
    sale = _container(request).sale_service.get_sale(session_id)
    if sale is None:
        raise NotFoundError(f"No sale recorded for session {session_id}.")
    return sale_to_record(sale)


@router.put("/sessions/{session_id}/sale")
async def record_sale(
    session_id: str, payload: SaleRequest, request: Request
) -> dict[str, object]:
    """Record or replace the sale outcome for a session."""
    draft = SaleDraft(
        session_id=session_id,
        sale_status=payload.sale_status,
        seller=payload.seller,
        payments=[(item.method, item.value) for item in payload.payments],
        delivery_type=payload.delivery_type,
        client_name=payload.client_name,
        client_email=payload.client_email,
        client_whatsapp=payload.client_whatsapp,
    )
    sale = _container(request).sale_service.record_sale(draft)
    return sale_to_record(sale)


@router.post("/sessions/{session_id}/sale/delivery")
async def deliver_sale(session_id: str, request: Request) -> dict[str, object]:
    """Mark a sold session's photos as sent."""
    sale = _container(request).sale_service.mark_delivered(session_id)
    return sale_to_record(sale)
