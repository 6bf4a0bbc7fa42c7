from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.db.session import get_db
from backoffice.core.settings import settings
from backoffice.models import Alert

"""
API System Status.

Rôle (fonctionnel) :
- Expose un endpoint de statut “healthcheck” pour la plateforme.
- Vérifie la disponibilité de la base (requête simple).
- Donne le nombre d’alertes ouvertes (échéance non dépassée) comme indicateur d’activité.
"""

log = logging.getLogger("backoffice.status")

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/status")
async def system_status(db: AsyncSession = Depends(get_db)):
    # 1) DB check (requête minimale)
    db_ok = True
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        log.warning("db_unavailable", extra={"path": "/system/status"}, exc_info=exc)
        db_ok = False

    # 2) Alertes à venir
    upcoming_alerts = None
    if db_ok:
        today = datetime.now(timezone.utc).date()
        r = await db.execute(select(func.count()).select_from(Alert).where(Alert.due_date >= today))
        upcoming_alerts = int(r.scalar_one())

    # Réponse (format constant) pour monitoring / UI
    return {
        "ok": db_ok,
        "db": {"ok": db_ok},
        "storage": {"ok": settings.storage_enabled},
        "upcoming_alerts": upcoming_alerts,
        "ts": datetime.now(timezone.utc).isoformat(),
    }
