from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.deps import require_user
from backoffice.core.security import Principal
from backoffice.db.session import get_db
from backoffice.schemas.dashboard import DashboardOut
from backoffice.services.dashboard_service import get_dashboard

"""
API Dashboard.

Rôle (fonctionnel) :
- Expose le tableau de bord du rôle courant (en-tête + cartes + actions).
- Le rôle et le pays viennent des headers X-User-Role / X-User-Country.
"""

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
async def dashboard(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return await get_dashboard(db, principal)
