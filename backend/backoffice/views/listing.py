from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from backoffice.views.details import get_nested

"""
Listes locales (filtre / tri / pagination en mémoire).

Rôle (fonctionnel) :
- Reproduit le comportement des écrans “liste” du front sur des enregistrements déjà chargés :
  - recherche texte insensible à la casse sur des clés choisies (chemins pointés : "user.lastName")
  - filtres d’égalité, la valeur "all" (ou vide) désactive un filtre
  - tri asc/desc sur n’importe quelle clé, valeurs vides toujours en fin de liste
  - pagination : page demandée + total + nombre de pages
- Fonctions pures : aucune I/O, utilisables par le script de consultation (scripts/browse.py).
"""

ALL = "all"


@dataclass(frozen=True)
class Page:
    items: List[Dict[str, Any]]
    page: int
    per_page: int
    total: int
    total_pages: int


def search_records(records: Iterable[Dict[str, Any]], term: Optional[str], keys: Sequence[str]) -> List[Dict[str, Any]]:
    needle = (term or "").strip().lower()
    rows = list(records)
    if not needle:
        return rows

    def _match(rec: Dict[str, Any]) -> bool:
        for key in keys:
            value = get_nested(rec, key)
            if value is not None and needle in str(value).lower():
                return True
        return False

    return [r for r in rows if _match(r)]


def filter_records(records: Iterable[Dict[str, Any]], filters: Mapping[str, Any]) -> List[Dict[str, Any]]:
    active = {k: v for k, v in filters.items() if v not in (None, "", ALL)}
    rows = list(records)
    if not active:
        return rows
    return [r for r in rows if all(str(get_nested(r, k)) == str(v) for k, v in active.items())]


def sort_records(records: Iterable[Dict[str, Any]], key: Optional[str], descending: bool = False) -> List[Dict[str, Any]]:
    rows = list(records)
    if not key:
        return rows

    present = [r for r in rows if get_nested(r, key) not in (None, "")]
    missing = [r for r in rows if get_nested(r, key) in (None, "")]

    def _sort_key(rec: Dict[str, Any]):
        value = get_nested(rec, key)
        # Les chaînes sont comparées sans tenir compte de la casse
        if isinstance(value, str):
            return (1, value.lower())
        return (0, value)

    present.sort(key=_sort_key, reverse=descending)
    return present + missing


def paginate(records: Sequence[Dict[str, Any]], page: int = 1, per_page: int = 10) -> Page:
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    total = len(records)
    total_pages = math.ceil(total / per_page)
    page = max(page, 1)
    start = (page - 1) * per_page
    return Page(
        items=list(records[start:start + per_page]),
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
    )


def local_view(
    records: Iterable[Dict[str, Any]],
    *,
    search: Optional[str] = None,
    search_keys: Sequence[str] = (),
    filters: Optional[Mapping[str, Any]] = None,
    sort_by: Optional[str] = None,
    descending: bool = False,
    page: int = 1,
    per_page: int = 10,
) -> Page:
    """Chaîne complète d’un écran liste : recherche -> filtres -> tri -> pagination."""
    rows = search_records(records, search, search_keys)
    rows = filter_records(rows, filters or {})
    rows = sort_records(rows, sort_by, descending)
    return paginate(rows, page, per_page)
