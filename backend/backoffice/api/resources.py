from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.deps import require_domain
from backoffice.core.errors import AppHTTPException, id_required
from backoffice.core.security import Principal
from backoffice.core.settings import settings
from backoffice.db.session import get_db
from backoffice.schemas.common import DeleteOut
from backoffice.services.crud import CrudService, Resource, pagination
from backoffice.services.registry import RESOURCES
from backoffice.views.details import render_details

"""
API Ressources (CRUD générique).

Rôle (fonctionnel) :
- Construit un router par ressource déclarée dans le registry (véhicules, personnel, finance…).
- Un chemin = une ressource, avec dispatch par méthode HTTP :
  - GET    /<path>              : liste paginée + recherche + filtres
  - GET    /<path>/{id}         : enregistrement (avec résumé parent)
  - GET    /<path>/{id}/details : vue détail (libellés + couleurs)
  - POST   /<path>              : création (201)
  - PUT    /<path>?id=<n>       : mise à jour partielle
  - DELETE /<path>?id=<n>       : suppression
- Toute autre méthode -> 405 (handler dans main.py).

Notes :
- Les annotations des endpoints référencent le schéma de la ressource (variable locale) :
  ce module n’utilise pas `from __future__ import annotations`.
"""


def parse_record_id(raw: Optional[str], label: str) -> int:
    """Identifiant en query/path : absent -> 400 "<Label> ID is required", non numérique -> 400."""
    if raw is None or not str(raw).strip():
        raise id_required(label)
    try:
        return int(str(raw).strip())
    except ValueError:
        raise AppHTTPException(400, f"Invalid {label} ID", code="INVALID_ID")


def build_resource_router(resource: Resource) -> APIRouter:
    router = APIRouter(prefix=f"/{resource.path}", tags=[resource.domain])
    service = CrudService(resource)
    schema_in = resource.schema_in
    access = Depends(require_domain(resource.domain))

    @router.get("")
    async def list_records(
        request: Request,
        db: AsyncSession = Depends(get_db),
        principal: Principal = access,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        search: Optional[str] = None,
    ):
        rows, total = await service.list(
            db,
            page=page,
            limit=limit,
            search=search,
            params=request.query_params,
            principal=principal,
        )
        return {
            resource.collection: [resource.dump(r) for r in rows],
            "pagination": pagination(page, limit, total),
        }

    @router.get("/{record_id}")
    async def get_record(
        record_id: str,
        db: AsyncSession = Depends(get_db),
        principal: Principal = access,
    ):
        obj = await service.get(db, parse_record_id(record_id, resource.label), principal=principal)
        return resource.dump(obj)

    @router.get("/{record_id}/details")
    async def get_record_details(
        record_id: str,
        db: AsyncSession = Depends(get_db),
        principal: Principal = access,
    ):
        obj = await service.get(db, parse_record_id(record_id, resource.label), principal=principal)
        return render_details(resource.path, resource.dump(obj))

    @router.post("", status_code=201)
    async def create_record(
        payload: schema_in = Body(...),
        db: AsyncSession = Depends(get_db),
        principal: Principal = access,
    ):
        obj = await service.create(db, payload, principal=principal)
        return resource.dump(obj)

    @router.put("")
    async def update_record(
        payload: schema_in = Body(...),
        record_id: Optional[str] = Query(None, alias="id"),
        db: AsyncSession = Depends(get_db),
        principal: Principal = access,
    ):
        rid = parse_record_id(record_id, resource.label)
        obj = await service.update(db, rid, payload, principal=principal)
        return resource.dump(obj)

    @router.delete("", response_model=DeleteOut)
    async def delete_record(
        record_id: Optional[str] = Query(None, alias="id"),
        db: AsyncSession = Depends(get_db),
        principal: Principal = access,
    ):
        rid = parse_record_id(record_id, resource.label)
        await service.delete(db, rid, principal=principal)
        return {"message": f"{resource.label} deleted successfully"}

    return router


def build_resource_routers() -> list[APIRouter]:
    return [build_resource_router(r) for r in RESOURCES]
