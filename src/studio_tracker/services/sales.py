"""Recording sale outcomes for sessions."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime

from studio_tracker.domain.errors import NotFoundError, ValidationError
from studio_tracker.domain.sales import (
    DECLINED_DELIVERY_TYPES,
    MAX_PAYMENT_METHODS,
    SOLD_DELIVERY_TYPES,
    ClientContact,
    DeclinedSale,
    DeliveryType,
    NoShowSale,
    PaymentEntry,
    PaymentMethod,
    Sale,
    SaleDraft,
    SaleStatus,
    SoldSale,
)
from studio_tracker.domain.sessions import SessionStatus
from studio_tracker.services.clock import Clock
from studio_tracker.services.records import StudioRecords

_logger = logging.getLogger(__name__)

SESSION_STATUS_BY_OUTCOME = {
    SaleStatus.SOLD: SessionStatus.COMPLETED,
    SaleStatus.DECLINED: SessionStatus.IN_PROGRESS,
    SaleStatus.NOT_SEEN: SessionStatus.PENDING,
}


@dataclass
class SaleService:
    """Upserts sales and keeps the parent session status in step."""

    records: StudioRecords
    clock: Clock

    def list_sales(self) -> list[Sale]:
        return self.records.load_sales()

    def get_sale(self, session_id: str) -> Sale | None:
        for sale in self.records.load_sales():
            if sale.session_id == session_id:
                return sale
        return None

    def record_sale(self, draft: SaleDraft) -> Sale:
        """Validate a draft and replace any sale stored for its session."""
        sessions = self.records.load_sessions()
        if not any(session.id == draft.session_id for session in sessions):
            raise NotFoundError(f"Session {draft.session_id} not found.")
        try:
            sale = build_sale(draft, self.clock())
            if sale.seller and sale.seller not in (self.records.load_sellers() or []):
                raise ValidationError(f"Seller '{sale.seller}' is not registered.")
        except ValidationError as exc:
            _logger.warning(
                "Rejected sale: session_id=%s reason=%s", draft.session_id, exc
            )
            raise

        sales = [
            existing
            for existing in self.records.load_sales()
            if existing.session_id != draft.session_id
        ]
        sales.append(sale)
        self.records.save_sales(sales)

        new_status = SESSION_STATUS_BY_OUTCOME[sale.status]
        self.records.save_sessions(
            [
                replace(session, status=new_status)
                if session.id == draft.session_id
                else session
                for session in sessions
            ]
        )
        _logger.info(
            "Sale recorded: session_id=%s status=%s value=%.2f",
            sale.session_id,
            sale.status.value,
            sale.sale_value,
        )
        return sale

    def mark_delivered(self, session_id: str) -> SoldSale:
        """Flag a sold session's photos as sent to the client."""
        sales = self.records.load_sales()
        for index, sale in enumerate(sales):
            if sale.session_id != session_id:
                continue
            if not isinstance(sale, SoldSale):
                raise ValidationError("Only sold sessions can be delivered.")
            delivered = sale.mark_sent()
            sales[index] = delivered
            self.records.save_sales(sales)
            _logger.info("Delivery sent: session_id=%s", session_id)
            return delivered
        raise NotFoundError(f"No sale recorded for session {session_id}.")


def build_sale(draft: SaleDraft, timestamp: datetime) -> Sale:
    """Turn raw form input into a sale variant, enforcing per-status rules."""
    try:
        status = SaleStatus(draft.sale_status)
    except ValueError as exc:
        raise ValidationError(f"Unknown sale status '{draft.sale_status}'.") from exc

    client = ClientContact(
        name=draft.client_name.strip(),
        email=draft.client_email.strip(),
        whatsapp=draft.client_whatsapp.strip(),
    )
    if status is SaleStatus.NOT_SEEN:
        return NoShowSale(
            session_id=draft.session_id, timestamp=timestamp, client=client
        )

    seller = draft.seller.strip()
    if not seller:
        raise ValidationError("Select the seller.")

    if status is SaleStatus.DECLINED:
        return DeclinedSale(
            session_id=draft.session_id,
            seller=seller,
            delivery_type=_parse_delivery_type(
                draft.delivery_type, DECLINED_DELIVERY_TYPES
            ),
            timestamp=timestamp,
            client=client,
        )

    return SoldSale(
        session_id=draft.session_id,
        seller=seller,
        delivery_type=_parse_delivery_type(draft.delivery_type, SOLD_DELIVERY_TYPES),
        payments=_parse_payments(draft.payments),
        timestamp=timestamp,
        client=client,
    )


def _parse_delivery_type(raw: str, allowed: frozenset[DeliveryType]) -> DeliveryType:
    if not raw:
        raise ValidationError("Select what was delivered to the client.")
    try:
        delivery_type = DeliveryType(raw)
    except ValueError as exc:
        raise ValidationError(f"Unknown delivery type '{raw}'.") from exc
    if delivery_type not in allowed:
        raise ValidationError(f"Delivery type '{raw}' does not match the sale status.")
    return delivery_type


def _parse_payments(raw: list[tuple[str, float]]) -> tuple[PaymentEntry, ...]:
    if len(raw) > MAX_PAYMENT_METHODS:
        raise ValidationError(
            f"A sale can be split across at most {MAX_PAYMENT_METHODS} payments."
        )
    payments: list[PaymentEntry] = []
    for method_raw, value_raw in raw:
        value = float(value_raw)
        if not math.isfinite(value) or value < 0:
            raise ValidationError("Payment values must be positive.")
        if value == 0:
            continue
        try:
            method = PaymentMethod(method_raw)
        except ValueError as exc:
            raise ValidationError(f"Unknown payment method '{method_raw}'.") from exc
        if any(payment.method is method for payment in payments):
            raise ValidationError(f"Payment method '{method_raw}' is repeated.")
        payments.append(PaymentEntry(method=method, value=value))

    if not payments:
        raise ValidationError("Enter at least one payment with a positive value.")
    return tuple(payments)
