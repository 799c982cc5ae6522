"""Domain models for sale outcomes.

A sale is one of three variants, keyed by the outcome recorded for a session:
``SoldSale`` (VD), ``DeclinedSale`` (D) and ``NoShowSale`` (NV). Only a sold
sale carries payments and a delivery status.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

MAX_PAYMENT_METHODS = 3


class SaleStatus(Enum):
    """Outcome of presenting a session's photos to the client."""

    SOLD = "VD"
    DECLINED = "D"
    NOT_SEEN = "NV"


class PaymentMethod(Enum):
    """Accepted payment methods."""

    PIX = "pix"
    CARD = "cartao"
    CASH = "dinheiro"


class DeliveryType(Enum):
    """What was handed to the client."""

    SELECTED = "selected"
    COMPLETE = "complete"
    COURTESY = "courtesy"
    NONE = "none"


SOLD_DELIVERY_TYPES = frozenset({DeliveryType.SELECTED, DeliveryType.COMPLETE})
DECLINED_DELIVERY_TYPES = frozenset({DeliveryType.COURTESY, DeliveryType.NONE})


class DeliveryStatus(Enum):
    """Whether the sold photos were sent to the client."""

    PENDING = "pending"
    SENT = "sent"


@dataclass(frozen=True)
class PaymentEntry:
    """One slice of a split payment."""

    method: PaymentMethod
    value: float


@dataclass(frozen=True)
class ClientContact:
    """Optional client contact details."""

    name: str = ""
    email: str = ""
    whatsapp: str = ""


@dataclass(frozen=True)
class SoldSale:
    """Photos sold (VD)."""

    session_id: str
    seller: str
    delivery_type: DeliveryType
    payments: tuple[PaymentEntry, ...]
    timestamp: datetime
    client: ClientContact = field(default_factory=ClientContact)
    delivery_status: DeliveryStatus = DeliveryStatus.PENDING

    @property
    def status(self) -> SaleStatus:
        return SaleStatus.SOLD

    @property
    def sale_value(self) -> float:
        return sum(payment.value for payment in self.payments)

    def mark_sent(self) -> "SoldSale":
        """Return a copy with the delivery handed off."""
        return replace(self, delivery_status=DeliveryStatus.SENT)


@dataclass(frozen=True)
class DeclinedSale:
    """Client gave up on buying (D)."""

    session_id: str
    seller: str
    delivery_type: DeliveryType
    timestamp: datetime
    client: ClientContact = field(default_factory=ClientContact)

    @property
    def status(self) -> SaleStatus:
        return SaleStatus.DECLINED

    @property
    def sale_value(self) -> float:
        return 0.0

    @property
    def delivery_status(self) -> DeliveryStatus | None:
        return None


@dataclass(frozen=True)
class NoShowSale:
    """Client was not seen (NV)."""

    session_id: str
    timestamp: datetime
    client: ClientContact = field(default_factory=ClientContact)

    @property
    def status(self) -> SaleStatus:
        return SaleStatus.NOT_SEEN

    @property
    def sale_value(self) -> float:
        return 0.0

    @property
    def seller(self) -> str:
        return ""

    @property
    def delivery_status(self) -> DeliveryStatus | None:
        return None


Sale = SoldSale | DeclinedSale | NoShowSale


@dataclass(frozen=True)
class SaleDraft:
    """Raw sale form input, validated into a ``Sale`` by the sale service."""

    session_id: str
    sale_status: str
    seller: str = ""
    payments: list[tuple[str, float]] = field(default_factory=list)
    delivery_type: str = ""
    client_name: str = ""
    client_email: str = ""
    client_whatsapp: str = ""
