from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from backoffice.schemas.common import IsoDate, RecordOut, WriteModel

"""
Schemas Finance (Pydantic) : mouvements bancaires et factures.
"""


class BankTransactionIn(WriteModel):
    bank_id: Optional[int] = None
    name: Optional[str] = None
    transaction_date: Optional[IsoDate] = Field(default=None, alias="date")
    description: Optional[str] = None
    amount: Optional[float] = None
    devise: Optional[str] = None
    account_type: Optional[str] = None
    account_number: Optional[str] = None
    attachment: Optional[str] = None


class BankTransactionOut(RecordOut):
    id: int = Field(alias="transactionId")
    bank_id: int
    name: Optional[str] = None
    transaction_date: date = Field(alias="date")
    description: Optional[str] = None
    amount: float
    devise: str
    account_type: str
    account_number: str
    attachment: Optional[str] = None


class InvoiceIn(WriteModel):
    invoice_number: Optional[str] = None
    supplier: Optional[str] = None
    service_type: Optional[str] = None
    amount: Optional[float] = None
    devise: Optional[str] = None
    issue_date: Optional[IsoDate] = None
    due_date: Optional[IsoDate] = None
    status: Optional[str] = None
    attachment: Optional[str] = None


class InvoiceOut(RecordOut):
    id: int = Field(alias="invoiceId")
    invoice_number: Optional[str] = None
    supplier: Optional[str] = None
    service_type: Optional[str] = None
    amount: Optional[float] = None
    devise: Optional[str] = None
    issue_date: date
    due_date: Optional[date] = None
    status: str
    attachment: Optional[str] = None
