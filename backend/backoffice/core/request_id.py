from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import Any

"""
Core Request ID.

Rôle (fonctionnel) :
- Gère un identifiant de requête (request_id) stocké dans un ContextVar.
- Permet de corréler logs et erreurs pour une même requête / invocation.
- Le request_id peut être :
  - fourni par un header entrant (X-Request-Id),
  - repris du contexte Lambda (aws_request_id) en mode serverless,
  - ou généré automatiquement si absent.
"""

REQUEST_ID_HEADER = "X-Request-Id"

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(rid: str | None) -> None:
    _request_id.set(rid)


def get_request_id() -> str | None:
    return _request_id.get()


def ensure_request_id(incoming: str | None = None) -> str:
    """
    Garantit un request_id pour le contexte courant.

    - Si un request_id entrant est fourni, il est nettoyé et réutilisé.
    - Sinon, on génère un UUID.
    """
    rid = (incoming or "").strip() or str(uuid.uuid4())
    set_request_id(rid)
    return rid


def request_id_from_lambda(event: dict[str, Any] | None, context: Any) -> str | None:
    """Extrait un identifiant de corrélation d’un event API Gateway / Netlify (header ou contexte Lambda)."""
    headers = (event or {}).get("headers") or {}
    for key, value in headers.items():
        if key.lower() == REQUEST_ID_HEADER.lower() and value:
            return str(value)
    return getattr(context, "aws_request_id", None)
