from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

"""
DB Base.

Rôle (fonctionnel) :
- Définit la classe Base SQLAlchemy commune à tous les modèles ORM.
- Fournit les colonnes de tenue communes à toutes les entités du back-office :
  - createdAt / updatedAt (assignés par le store),
  - Inserteridentity / InserterCountry (assignés par l’appelant à l’écriture).

Note :
- Tous les modèles doivent hériter de Base pour être enregistrés dans la metadata (Alembic).
"""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Classe racine ORM (SQLAlchemy Declarative)."""
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )


class InserterMixin:
    # Qui a créé l’enregistrement (identité utilisateur) et dans quel pays
    inserter_identity: Mapped[str | None] = mapped_column(String(120), nullable=True)
    inserter_country: Mapped[str | None] = mapped_column(String(30), nullable=True, index=True)


class RecordMixin(TimestampMixin, InserterMixin):
    """Colonnes de tenue partagées par tous les enregistrements métier."""
