from __future__ import annotations

from fastapi import Depends, Request

from backoffice.core.errors import AppHTTPException
from backoffice.core.security import Principal, principal_from_request, require_api_key
from backoffice.core.settings import settings

"""
Dépendances API.

Rôle (fonctionnel) :
- Centralise les dépendances réutilisables sur les routes.
- get_principal : API key + contexte utilisateur (identité, rôle, pays).
- require_user : refuse les appels sans rôle quand AUTH_REQUIRED est actif (401).
- require_domain : contrôle d’accès d’un rôle à un domaine (véhicules, personnel, finance…).
"""


async def get_principal(request: Request) -> Principal:
    await require_api_key(request)
    principal = principal_from_request(request)
    request.state.principal = principal
    return principal


async def require_user(principal: Principal = Depends(get_principal)) -> Principal:
    # Sans rôle : accepté seulement si l’auth n’est pas exigée (dev / appels techniques)
    if principal.is_anonymous and settings.AUTH_REQUIRED:
        raise AppHTTPException(401, "Authentification requise", code="UNAUTHORIZED")
    return principal


def require_domain(domain: str):
    """Fabrique une dépendance qui vérifie l’accès au domaine et retourne le Principal."""

    async def _check(principal: Principal = Depends(require_user)) -> Principal:
        if principal.is_anonymous:
            return principal
        if not principal.can_access(domain):
            raise AppHTTPException(403, "Accès non autorisé", code="FORBIDDEN")
        return principal

    return _check
