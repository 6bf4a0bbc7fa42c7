from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException

"""
Core Errors.

Rôle (fonctionnel) :
- Standardise le format des erreurs renvoyées par l’API : une seule enveloppe `{"error": "<message>"}`,
  identique pour toutes les ressources (le front affiche le message tel quel).
- Fournit une exception applicative (AppHTTPException) pour lever des erreurs métier de façon cohérente.
- Le `code` reste disponible côté serveur (logs) sans être exposé au client.

Deux familles d’erreurs :
- erreurs client (400) : champ requis manquant, identifiant absent/invalide, valeur invalide ;
- erreurs serveur (500) : exceptions du store, JSON mal formé, imprévus.
"""


def error_payload(message: str) -> Dict[str, Any]:
    """Construit l’enveloppe d’erreur de l’API."""
    return {"error": message}


class AppHTTPException(HTTPException):
    """
    Exception applicative standardisée.

    Exemple :
        raise AppHTTPException(400, "Field vehicleId is required", code="FIELD_REQUIRED")
    """

    def __init__(self, status_code: int, message: str, *, code: str = "HTTP_ERROR"):
        super().__init__(status_code=status_code, detail={"code": code, "message": message})
        self.code = code
        self.message = message


def required_field(field: str) -> AppHTTPException:
    return AppHTTPException(400, f"Field {field} is required", code="FIELD_REQUIRED")


def id_required(label: str) -> AppHTTPException:
    return AppHTTPException(400, f"{label} ID is required", code="ID_REQUIRED")


def not_found(label: str) -> AppHTTPException:
    return AppHTTPException(404, f"{label} not found", code="NOT_FOUND")
