from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base, RecordMixin

"""
Model Alert.

Rôle (fonctionnel) :
- Rappel / échéance à traiter (renouvellement d’assurance, fin de contrat, visite médicale…).
- Porte une priorité (HIGH / MEDIUM / LOW) et un type libre (catégorie de l’alerte).
- Peut être assignée à un salarié (user_id optionnel).

Index :
- Optimise la liste “à traiter” (échéance + priorité).
"""


class Alert(RecordMixin, Base):
    __tablename__ = "alerts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    priority: Mapped[str] = mapped_column(String(10), nullable=False, default="MEDIUM", index=True)
    alert_type: Mapped[str] = mapped_column(String(60), nullable=False, index=True)

    # Salarié assigné (optionnel)
    user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)

    user = relationship("Employee", lazy="joined")

    __table_args__ = (
        Index("ix_alerts_due_priority", "due_date", "priority"),
    )
