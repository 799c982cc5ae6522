"""Typed access to the studio's key-value record store."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol

from studio_tracker.domain.sales import (
    ClientContact,
    DeclinedSale,
    DeliveryStatus,
    DeliveryType,
    NoShowSale,
    PaymentEntry,
    PaymentMethod,
    Sale,
    SaleStatus,
    SoldSale,
)
from studio_tracker.domain.sessions import SessionRecord, SessionStatus
from studio_tracker.domain.stats import StudioSnapshot

PHOTOGRAPHERS_KEY = "photographers"
SELLERS_KEY = "sellers"
SESSIONS_KEY = "sessions"
SALES_KEY = "sales"
DAILY_GOAL_KEY = "dailyGoal"
ALL_KEYS = "*"

ChangeListener = Callable[[str], None]


class RecordStore(Protocol):
    """Persistence interface for whole collections keyed by name."""

    def get(self, name: str) -> object | None:
        """Return the stored value, or None when absent."""

    def set(self, name: str, value: object) -> None:
        """Replace the stored value."""

    def clear(self) -> None:
        """Remove every stored value."""


@dataclass
class StudioRecords:
    """Loads and saves typed collections and notifies listeners on writes."""

    store: RecordStore
    listeners: list[ChangeListener] = field(default_factory=list)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener and return a function that removes it."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def load_photographers(self) -> list[str] | None:
        return _as_names(self.store.get(PHOTOGRAPHERS_KEY))

    def save_photographers(self, names: list[str]) -> None:
        self._write(PHOTOGRAPHERS_KEY, list(names))

    def load_sellers(self) -> list[str] | None:
        return _as_names(self.store.get(SELLERS_KEY))

    def save_sellers(self, names: list[str]) -> None:
        self._write(SELLERS_KEY, list(names))

    def load_sessions(self) -> list[SessionRecord]:
        raw = self.store.get(SESSIONS_KEY)
        if not isinstance(raw, list):
            return []
        return [session_from_record(row) for row in raw]

    def save_sessions(self, sessions: list[SessionRecord]) -> None:
        self._write(SESSIONS_KEY, [session_to_record(item) for item in sessions])

    def load_sales(self) -> list[Sale]:
        raw = self.store.get(SALES_KEY)
        if not isinstance(raw, list):
            return []
        return [sale_from_record(row) for row in raw]

    def save_sales(self, sales: list[Sale]) -> None:
        self._write(SALES_KEY, [sale_to_record(item) for item in sales])

    def load_daily_goal(self) -> float:
        raw = self.store.get(DAILY_GOAL_KEY)
        if raw is None or raw == "":
            return 0.0
        return float(raw)

    def save_daily_goal(self, goal: float) -> None:
        self._write(DAILY_GOAL_KEY, _format_number(goal))

    def clear(self) -> None:
        self.store.clear()
        self._notify(ALL_KEYS)

    def snapshot(self) -> StudioSnapshot:
        """Read every collection needed for aggregation."""
        return StudioSnapshot(
            sessions=self.load_sessions(),
            sales=self.load_sales(),
            photographers=self.load_photographers() or [],
            sellers=self.load_sellers() or [],
            daily_goal=self.load_daily_goal(),
        )

    def _write(self, name: str, value: object) -> None:
        self.store.set(name, value)
        self._notify(name)

    def _notify(self, name: str) -> None:
        for listener in list(self.listeners):
            listener(name)


def session_to_record(session: SessionRecord) -> dict[str, object]:
    return {
        "id": session.id,
        "photographer": session.photographer,
        "model": session.model,
        "date": session.date.isoformat(),
        "status": session.status.value,
    }


def session_from_record(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        id=str(row["id"]),
        photographer=str(row.get("photographer", "")),
        model=str(row.get("model", "")),
        date=date.fromisoformat(str(row["date"])),
        status=SessionStatus(row.get("status", SessionStatus.PENDING.value)),
    )


def sale_to_record(sale: Sale) -> dict[str, object]:
    """Serialize a sale to its stored camelCase shape."""
    record: dict[str, object] = {
        "sessionId": sale.session_id,
        "seller": sale.seller,
        "saleStatus": sale.status.value,
        "saleValue": sale.sale_value,
        "paymentMethods": [],
        "photoType": "",
        "clientName": sale.client.name,
        "clientEmail": sale.client.email,
        "clientWhatsapp": sale.client.whatsapp,
        "timestamp": sale.timestamp.isoformat(),
    }
    if isinstance(sale, SoldSale):
        record["paymentMethods"] = [
            {"method": payment.method.value, "value": payment.value}
            for payment in sale.payments
        ]
        record["photoType"] = sale.delivery_type.value
        record["deliveryStatus"] = sale.delivery_status.value
    elif isinstance(sale, DeclinedSale):
        record["photoType"] = sale.delivery_type.value
    return record


def sale_from_record(row: dict[str, object]) -> Sale:
    """Parse a stored sale into its variant."""
    status = SaleStatus(row["saleStatus"])
    session_id = str(row["sessionId"])
    timestamp = datetime.fromisoformat(str(row["timestamp"]))
    client = ClientContact(
        name=str(row.get("clientName") or ""),
        email=str(row.get("clientEmail") or ""),
        whatsapp=str(row.get("clientWhatsapp") or ""),
    )
    if status is SaleStatus.SOLD:
        payments = row.get("paymentMethods") or []
        return SoldSale(
            session_id=session_id,
            seller=str(row.get("seller") or ""),
            delivery_type=DeliveryType(row["photoType"]),
            payments=tuple(
                PaymentEntry(
                    method=PaymentMethod(entry["method"]),
                    value=float(entry["value"]),
                )
                for entry in payments
                if isinstance(entry, dict)
            ),
            timestamp=timestamp,
            client=client,
            delivery_status=DeliveryStatus(
                row.get("deliveryStatus") or DeliveryStatus.PENDING.value
            ),
        )
    if status is SaleStatus.DECLINED:
        return DeclinedSale(
            session_id=session_id,
            seller=str(row.get("seller") or ""),
            delivery_type=DeliveryType(row["photoType"]),
            timestamp=timestamp,
            client=client,
        )
    return NoShowSale(session_id=session_id, timestamp=timestamp, client=client)


def _as_names(raw: object) -> list[str] | None:
    if not isinstance(raw, list):
        return None
    return [str(name) for name in raw]


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
