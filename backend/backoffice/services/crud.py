from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type, Union

from sqlalchemy import desc, func, inspect, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.countries import normalize_country
from backoffice.core.errors import AppHTTPException, not_found, required_field
from backoffice.core.security import Principal
from backoffice.db.base import Base
from backoffice.schemas.common import Pagination, RecordOut, WriteModel

"""
CRUD Service (générique).

Rôle (fonctionnel) :
- Implémente une seule fois les quatre opérations communes à toutes les entités du back-office :
  - list   : recherche texte + filtres d’égalité + tri (création desc) + pagination + total
  - create : contrôle des champs requis (ordre déclaré) + tag Inserteridentity / InserterCountry
  - update : mise à jour partielle (seuls les champs envoyés changent)
  - delete : suppression physique
- Chaque entité est décrite par une déclaration `Resource` (voir services/registry.py) :
  modèle ORM, schémas, clé de collection, libellé, champs requis, champs de recherche, filtres.

Cloisonnement pays :
- Les rôles liés à un pays (tous sauf SUPER_ADMIN) ne voient que les enregistrements
  dont InserterCountry correspond à leur pays (listes, détail, mise à jour, suppression).

Erreurs :
- Les erreurs métier sont levées en AppHTTPException (400 / 404).
- Les erreurs du store (FK inconnue, contrainte) sont propagées après rollback
  et converties en 500 par le handler SQLAlchemy (main.py).
"""

log = logging.getLogger("backoffice.crud")

# Champ de recherche : attribut du modèle, ou (relation, attribut du parent)
SearchField = Union[str, Tuple[str, str]]


@dataclass(frozen=True)
class ListFilter:
    """Filtre d’égalité exposé en query param (valeur `all` = pas de filtre)."""
    param: str
    attr: str
    cast: Callable[[str], Any] = str
    all_value: Optional[str] = "all"


# Filtre pays commun à toutes les ressources
COUNTRY_FILTER = ListFilter("InserterCountry", "inserter_country", normalize_country)


@dataclass(frozen=True)
class Resource:
    """Déclaration d’une entité exposée par l’API."""
    path: str
    model: Type[Base]
    schema_in: Type[WriteModel]
    schema_out: Type[RecordOut]
    collection: str
    label: str
    domain: str
    title: str = ""
    required: Tuple[str, ...] = ()
    search: Tuple[SearchField, ...] = ()
    filters: Tuple[ListFilter, ...] = ()

    @property
    def pk_attr(self) -> str:
        return inspect(self.model).primary_key[0].key

    @property
    def pk_column(self):
        return getattr(self.model, self.pk_attr)

    @property
    def all_filters(self) -> Tuple[ListFilter, ...]:
        return self.filters + (COUNTRY_FILTER,)

    def wire_name(self, attr: str) -> str:
        """Nom du champ côté front (alias Pydantic), utilisé dans les messages d’erreur."""
        info = self.schema_in.model_fields.get(attr)
        if info is not None and info.alias:
            return info.alias
        return attr

    def dump(self, obj: Any) -> Dict[str, Any]:
        """Sérialise un objet ORM au format du front (camelCase, dates ISO)."""
        return self.schema_out.model_validate(obj).model_dump(mode="json", by_alias=True)


def pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
    total_pages = math.ceil(total / limit) if limit else 0
    return Pagination(page=page, limit=limit, total=total, total_pages=total_pages).model_dump(by_alias=True)


class CrudService:
    """
    Service CRUD paramétré par une Resource.

    Le service ne gère pas le HTTP : il reçoit des valeurs déjà extraites (page, filtres, payload
    validé) et retourne des objets ORM. La sérialisation reste dans la couche API.
    """

    def __init__(self, resource: Resource) -> None:
        self.resource = resource
        self.model = resource.model

    # -----------------------------
    # Prédicats
    # -----------------------------
    def _scope(self, principal: Optional[Principal]) -> List[Any]:
        country = principal.scoped_country if principal is not None else None
        if country:
            return [self.model.inserter_country == country]
        return []

    def _check_write_country(self, country: Optional[str], principal: Optional[Principal]) -> None:
        """Un utilisateur cloisonné n’écrit que dans son pays."""
        scoped = principal.scoped_country if principal is not None else None
        if scoped and country and country != scoped:
            raise AppHTTPException(403, "Accès non autorisé", code="FORBIDDEN")

    def _search_condition(self, search: Optional[str]):
        term = (search or "").strip()
        if not term or not self.resource.search:
            return None

        clauses = []
        for spec in self.resource.search:
            if isinstance(spec, tuple):
                relation, attr = spec
                rel = getattr(self.model, relation)
                target = rel.property.mapper.class_
                clauses.append(rel.has(getattr(target, attr).icontains(term, autoescape=True)))
            else:
                clauses.append(getattr(self.model, spec).icontains(term, autoescape=True))
        return or_(*clauses)

    def _filter_conditions(self, params: Mapping[str, Any]) -> List[Any]:
        conditions = []
        for flt in self.resource.all_filters:
            raw = params.get(flt.param)
            if raw is None:
                continue
            raw = str(raw).strip()
            if not raw or (flt.all_value is not None and raw == flt.all_value):
                continue
            try:
                value = flt.cast(raw)
            except (TypeError, ValueError):
                raise AppHTTPException(400, f"Invalid value for {flt.param}", code="INVALID_FILTER")
            conditions.append(getattr(self.model, flt.attr) == value)
        return conditions

    def conditions(
        self,
        *,
        search: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        principal: Optional[Principal] = None,
    ) -> List[Any]:
        conds = self._scope(principal)
        text = self._search_condition(search)
        if text is not None:
            conds.append(text)
        conds.extend(self._filter_conditions(params or {}))
        return conds

    # -----------------------------
    # Lecture
    # -----------------------------
    async def list(
        self,
        db: AsyncSession,
        *,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        principal: Optional[Principal] = None,
    ) -> Tuple[Sequence[Any], int]:
        conds = self.conditions(search=search, params=params, principal=principal)

        # Total pour la pagination
        count_stmt = select(func.count()).select_from(self.model).where(*conds)
        total = (await db.execute(count_stmt)).scalar_one()

        # Création desc + clé primaire desc (ordre stable entre deux pages)
        stmt = (
            select(self.model)
            .where(*conds)
            .order_by(desc(self.model.created_at), desc(self.resource.pk_column))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = (await db.execute(stmt)).scalars().all()
        return rows, total

    async def count(self, db: AsyncSession, *, principal: Optional[Principal] = None) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._scope(principal))
        return (await db.execute(stmt)).scalar_one()

    async def get(self, db: AsyncSession, record_id: int, *, principal: Optional[Principal] = None):
        stmt = (
            select(self.model)
            .where(self.resource.pk_column == record_id, *self._scope(principal))
            .execution_options(populate_existing=True)
        )
        obj = (await db.execute(stmt)).scalars().first()
        if obj is None:
            raise not_found(self.resource.label)
        return obj

    # -----------------------------
    # Écriture
    # -----------------------------
    async def _commit(self, db: AsyncSession) -> None:
        try:
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            raise

    async def create(self, db: AsyncSession, payload: WriteModel, *, principal: Optional[Principal] = None):
        data = payload.model_dump(exclude_unset=True)

        # Premier champ requis manquant (ordre déclaré), valeur vide comprise
        for attr in self.resource.required:
            if not data.get(attr):
                raise required_field(self.resource.wire_name(attr))

        values = {k: v for k, v in data.items() if v is not None}

        # Tag de l’auteur : valeur envoyée, sinon utilisateur courant
        if principal is not None:
            if not values.get("inserter_identity") and principal.identity:
                values["inserter_identity"] = principal.identity
            if not values.get("inserter_country") and principal.country:
                values["inserter_country"] = principal.country
        self._check_write_country(values.get("inserter_country"), principal)

        obj = self.model(**values)
        db.add(obj)
        await self._commit(db)

        record_id = getattr(obj, self.resource.pk_attr)
        log.info(
            "record_created",
            extra={
                "resource": self.resource.path,
                "record_id": record_id,
                "actor": values.get("inserter_identity"),
                "country": values.get("inserter_country"),
            },
        )
        return await self.get(db, record_id)

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        payload: WriteModel,
        *,
        principal: Optional[Principal] = None,
    ):
        obj = await self.get(db, record_id, principal=principal)
        columns = self.model.__table__.columns
        data = payload.model_dump(exclude_unset=True)
        self._check_write_country(data.get("inserter_country"), principal)

        changed = []
        for attr, value in data.items():
            column = columns.get(attr)
            if column is None:
                continue
            # null sur une colonne obligatoire : ignoré (le champ reste inchangé)
            if value is None and not column.nullable:
                continue
            setattr(obj, attr, value)
            changed.append(attr)

        await self._commit(db)

        log.info(
            "record_updated",
            extra={
                "resource": self.resource.path,
                "record_id": record_id,
                "actor": principal.identity if principal else None,
                "fields": changed,
            },
        )
        return await self.get(db, record_id)

    async def delete(self, db: AsyncSession, record_id: int, *, principal: Optional[Principal] = None) -> None:
        obj = await self.get(db, record_id, principal=principal)
        await db.delete(obj)
        await self._commit(db)

        log.info(
            "record_deleted",
            extra={
                "resource": self.resource.path,
                "record_id": record_id,
                "actor": principal.identity if principal else None,
            },
        )
