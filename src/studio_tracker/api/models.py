"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class NameRequest(BaseModel):
    """Roster name payload."""

    name: str


class GoalRequest(BaseModel):
    """Daily goal payload."""

    goal: float


class SessionCreateRequest(BaseModel):
    """New session payload."""

    photographer: str
    model: str


class PaymentRequest(BaseModel):
    """One split-payment slot."""

    method: str
    value: float


class SaleRequest(BaseModel):
    """Sale form payload; which fields matter depends on ``sale_status``."""

    sale_status: str
    seller: str = ""
    payments: list[PaymentRequest] = Field(default_factory=list)
    delivery_type: str = ""
    client_name: str = ""
    client_email: str = ""
    client_whatsapp: str = ""
