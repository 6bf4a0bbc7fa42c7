from fastapi import APIRouter

from .health import router as health_router
from .status import router as status_router
from .dashboard import router as dashboard_router
from .uploads import router as uploads_router
from .resources import build_resource_routers

"""
Router principal de l’API.

Rôle (fonctionnel) :
- Regroupe les routeurs techniques (health, status), le dashboard, l’upload de fichiers
  et un routeur CRUD par ressource du registry (véhicules, personnel, finance, offres, alertes).
- Sert de point d’entrée unique pour l’inclusion dans l’application FastAPI.
"""

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(status_router)
api_router.include_router(dashboard_router)
api_router.include_router(uploads_router)

for resource_router in build_resource_routers():
    api_router.include_router(resource_router)
