from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base, RecordMixin

"""
Models Finance.

Rôle (fonctionnel) :
- BankTransaction : mouvement sur un compte bancaire (date, montant, type de compte).
- Invoice : facture fournisseur (prestataire, type de service, échéance, statut).
"""


class BankTransaction(RecordMixin, Base):
    __tablename__ = "bank_transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Référence de la banque (référentiel externe, pas de FK)
    bank_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(150), nullable=True)

    transaction_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    amount: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    devise: Mapped[str] = mapped_column(String(3), nullable=False)

    # CHECKING_ACCOUNT / SAVINGS_ACCOUNT / PROJECT_ACCOUNT
    account_type: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    account_number: Mapped[str] = mapped_column(String(60), nullable=False)
    attachment: Mapped[str | None] = mapped_column(String(500), nullable=True)


class Invoice(RecordMixin, Base):
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    invoice_number: Mapped[str | None] = mapped_column(String(60), nullable=True, index=True)
    supplier: Mapped[str | None] = mapped_column(String(150), nullable=True)
    service_type: Mapped[str | None] = mapped_column(String(60), nullable=True)

    amount: Mapped[float | None] = mapped_column(Numeric(14, 2), nullable=True)
    devise: Mapped[str | None] = mapped_column(String(3), nullable=True)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # PENDING / PAID / OVERDUE
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="PENDING", index=True)
    attachment: Mapped[str | None] = mapped_column(String(500), nullable=True)
