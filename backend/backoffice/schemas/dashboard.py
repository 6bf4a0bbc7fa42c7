from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

"""
Schemas Dashboard (Pydantic).

Rôle (fonctionnel) :
- Définit le contrat de réponse de l’endpoint “dashboard” par rôle.
- Structure les données nécessaires au front :
  - en-tête (titre + sous-titre selon le rôle),
  - cartes (une par ressource accessible, avec compteur dans le périmètre du pays),
  - actions rapides (liens vers les formulaires de création).

Notes :
- Ces schémas sont des “DTO” de lecture : ils agrègent des données calculées (pas des lignes DB).
"""


class DashboardCard(BaseModel):
    """Carte : une ressource + son volume (dans le périmètre de l’utilisateur)."""
    key: str
    title: str
    path: str
    domain: str
    count: int


class DashboardAction(BaseModel):
    label: str
    path: str


class DashboardOut(BaseModel):
    """Réponse complète du dashboard : en-tête + cartes + actions."""
    role: str
    title: str
    subtitle: str
    country: Optional[str] = None
    cards: List[DashboardCard]
    actions: List[DashboardAction]

    model_config = ConfigDict(extra="forbid")
