from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base, RecordMixin

"""
Models Offres (appels d’offres et devis).

Rôle (fonctionnel) :
- Dao : dossier d’appel d’offres (client, dates de transmission / soumission).
- Devis : devis émis à un client (montant, validité).
- Ami : appel à manifestation d’intérêt.

Statuts communs : APPLICATION / UNDER_REVIEW / PENDING / SHORTLISTED / BID_SUBMITTED / NOT_PURSUED.
"""


class Dao(RecordMixin, Base):
    __tablename__ = "offers_dao"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    dao_number: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    client_name: Mapped[str] = mapped_column(String(150), nullable=False)
    contact_name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    transmission_date: Mapped[date] = mapped_column(Date, nullable=False)
    submission_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # ELECTRONIC / PHYSICAL / EMAIL
    submission_type: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="PENDING", index=True)
    activity_code: Mapped[str | None] = mapped_column(String(40), nullable=True)
    devise: Mapped[str | None] = mapped_column(String(3), nullable=True)
    object: Mapped[str] = mapped_column(Text, nullable=False)
    attachment: Mapped[str | None] = mapped_column(String(500), nullable=True)


class Devis(RecordMixin, Base):
    __tablename__ = "offers_devis"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    index_number: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    client_name: Mapped[str] = mapped_column(String(150), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    validity_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="PENDING", index=True)
    devise: Mapped[str] = mapped_column(String(3), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachment: Mapped[str | None] = mapped_column(String(500), nullable=True)


class Ami(RecordMixin, Base):
    __tablename__ = "offers_ami"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    client: Mapped[str] = mapped_column(String(150), nullable=False)
    contact: Mapped[str | None] = mapped_column(String(150), nullable=True)
    deposit_date: Mapped[date] = mapped_column(Date, nullable=False)
    submission_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="PENDING", index=True)
    activity_code: Mapped[str | None] = mapped_column(String(40), nullable=True)
    soumission_type: Mapped[str | None] = mapped_column(String(30), nullable=True)
    object: Mapped[str] = mapped_column(Text, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachment: Mapped[str | None] = mapped_column(String(500), nullable=True)
