"""Pydantic models for Fakturoid API entities and listing filters."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict


class FakturoidModel(BaseModel):
    """Base for entities; unknown attributes returned by the API are kept."""

    model_config = ConfigDict(extra="allow")


class SubjectType(str, Enum):
    CUSTOMER = "customer"
    SUPPLIER = "supplier"
    BOTH = "both"


class Subject(FakturoidModel):
    """Contact (customer or supplier) of the account."""

    id: int | None = None
    custom_id: str | None = None
    type: SubjectType | None = None
    name: str | None = None
    street: str | None = None
    street2: str | None = None
    city: str | None = None
    zip: str | None = None
    country: str | None = None
    registration_no: str | None = None
    vat_no: str | None = None
    bank_account: str | None = None
    iban: str | None = None
    variable_symbol: str | None = None
    full_name: str | None = None
    email: str | None = None
    email_copy: str | None = None
    phone: str | None = None
    web: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    updated_at: datetime | None = None


class InvoiceStatus(str, Enum):
    OPEN = "open"
    SENT = "sent"
    OVERDUE = "overdue"
    PAID = "paid"
    CANCELLED = "cancelled"


class InvoiceEvent(str, Enum):
    """Actions accepted by the invoice ``fire`` endpoint."""

    MARK_AS_SENT = "mark_as_sent"
    DELIVER = "deliver"
    PAY = "pay"
    PAY_PROFORMA = "pay_proforma"
    REMOVE_PAYMENT = "remove_payment"
    DELIVER_REMINDER = "deliver_reminder"
    CANCEL = "cancel"
    UNDO_CANCEL = "undo_cancel"


class InvoiceLine(FakturoidModel):
    id: int | None = None
    name: str
    quantity: Decimal = Decimal("1")
    unit_name: str | None = None
    unit_price: Decimal
    vat_rate: Decimal | None = None
    unit_price_without_vat: Decimal | None = None
    unit_price_with_vat: Decimal | None = None


class Invoice(FakturoidModel):
    """Issued invoice or proforma."""

    id: int | None = None
    custom_id: str | None = None
    proforma: bool | None = None
    number: str | None = None
    variable_symbol: str | None = None
    subject_id: int | None = None
    status: InvoiceStatus | None = None
    order_number: str | None = None
    issued_on: date | None = None
    taxable_fulfillment_due: date | None = None
    due: int | None = None
    due_on: date | None = None
    sent_at: datetime | None = None
    paid_at: datetime | None = None
    note: str | None = None
    footer_note: str | None = None
    currency: str | None = None
    exchange_rate: Decimal | None = None
    payment_method: str | None = None
    language: str | None = None
    lines: list[InvoiceLine] | None = None
    subtotal: Decimal | None = None
    total: Decimal | None = None
    remaining_amount: Decimal | None = None
    html_url: str | None = None
    url: str | None = None
    updated_at: datetime | None = None


class SubjectQuery(BaseModel):
    """Filters for the subject listing."""

    since: datetime | None = None
    updated_since: datetime | None = None
    custom_id: str | None = None


class InvoiceQuery(BaseModel):
    """Filters for the invoice listing."""

    subject_id: int | None = None
    since: datetime | None = None
    updated_since: datetime | None = None
    number: str | None = None
    status: InvoiceStatus | None = None
    custom_id: str | None = None
