from __future__ import annotations

import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import Request

from backoffice.core.countries import normalize_country
from backoffice.core.errors import AppHTTPException
from backoffice.core.settings import settings

"""
Core Security (contexte d’authentification).

Rôle (fonctionnel) :
- API key optionnelle (Authorization: Bearer <token> ou X-API-Key: <token>).
- Contexte utilisateur (Principal) transmis par le front après connexion :
  - X-User-Id      : identité (tag Inserteridentity des écritures)
  - X-User-Role    : rôle applicatif (routage des tableaux de bord, accès aux domaines)
  - X-User-Country : pays effectif (tag InserterCountry + cloisonnement des listes)
- Matrice rôle -> domaines accessibles.

Comportement API key :
- Si API_KEY est configurée : la clé est requise.
- Si API_KEY est vide et ENV != prod : bypass (dev / local).
- Si API_KEY est vide et ENV = prod : erreur 500 (configuration serveur invalide).
"""


class Role(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    DIRECTOR = "DIRECTOR"
    DIRECTEUR_TECHNIQUE = "DIRECTEUR_TECHNIQUE"
    DIRECTEUR_ADMINISTRATIF = "DIRECTEUR_ADMINISTRATIF"
    EMPLOYEE = "EMPLOYEE"
    SECRETARY = "SECRETARY"
    ACCOUNTANT = "ACCOUNTANT"


ALL_DOMAINS = ("vehicles", "personnel", "finance", "offers", "alerts")

# Domaines accessibles par rôle
ROLE_DOMAINS: dict[Role, tuple[str, ...]] = {
    Role.SUPER_ADMIN: ALL_DOMAINS,
    Role.ADMIN: ALL_DOMAINS,
    Role.DIRECTOR: ALL_DOMAINS,
    Role.DIRECTEUR_TECHNIQUE: ("vehicles", "offers", "alerts"),
    Role.DIRECTEUR_ADMINISTRATIF: ("personnel", "finance", "alerts"),
    Role.ACCOUNTANT: ("finance", "alerts"),
    Role.SECRETARY: ("offers", "alerts"),
    Role.EMPLOYEE: ("alerts",),
}

# Rôles non cloisonnés par pays (vision consolidée)
GLOBAL_ROLES = frozenset({Role.SUPER_ADMIN})


@dataclass(frozen=True)
class Principal:
    """Utilisateur courant tel que déclaré par le front (peut être anonyme)."""
    identity: Optional[str] = None
    role: Optional[Role] = None
    country: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        return self.role is None

    @property
    def scoped_country(self) -> Optional[str]:
        """Pays imposé aux listes (None = pas de cloisonnement)."""
        if self.role in GLOBAL_ROLES:
            return None
        return self.country

    def can_access(self, domain: str) -> bool:
        if self.role is None:
            return False
        return domain in ROLE_DOMAINS.get(self.role, ())


def _extract_token(request: Request) -> Optional[str]:
    """Extrait un token depuis Authorization Bearer ou X-API-Key (si présent)."""
    auth = request.headers.get("authorization")
    if auth:
        parts = auth.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1].strip()

    x_api_key = request.headers.get("x-api-key")
    if x_api_key:
        return x_api_key.strip()

    return None


async def require_api_key(request: Request) -> None:
    """Vérifie la présence/validité d’une API key. Lève AppHTTPException si non autorisé."""
    expected = getattr(settings, "API_KEY", "") or ""

    if not expected:
        if str(getattr(settings, "ENV", "dev")).lower() == "prod":
            raise AppHTTPException(500, "API_KEY manquante côté serveur", code="SERVER_MISCONFIG")
        return

    token = _extract_token(request)
    if not token or not secrets.compare_digest(token, expected):
        raise AppHTTPException(401, "Clé API invalide ou manquante", code="UNAUTHORIZED")


def principal_from_request(request: Request) -> Principal:
    """Construit le Principal depuis les headers X-User-*."""
    identity = (request.headers.get("x-user-id") or "").strip() or None

    raw_role = (request.headers.get("x-user-role") or "").strip().upper()
    role = None
    if raw_role:
        try:
            role = Role(raw_role)
        except ValueError:
            raise AppHTTPException(403, f"Rôle inconnu: {raw_role}", code="FORBIDDEN")

    try:
        country = normalize_country(request.headers.get("x-user-country"))
    except ValueError as exc:
        raise AppHTTPException(400, str(exc), code="INVALID_COUNTRY")

    return Principal(identity=identity, role=role, country=country)
