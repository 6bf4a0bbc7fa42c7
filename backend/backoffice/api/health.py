from fastapi import APIRouter

from backoffice.core.settings import settings

"""
API Health.

Rôle (fonctionnel) :
- Endpoint simple pour vérifier que l’API répond.
- Indique si le stockage des pièces jointes est configuré.
"""

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "env": settings.ENV,
        "storage": settings.storage_enabled,
    }
