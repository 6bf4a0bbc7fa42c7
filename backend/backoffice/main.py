from __future__ import annotations

import time
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice.api.router import api_router
from backoffice.core.settings import settings
from backoffice.core.logging import setup_logging
from backoffice.core.errors import error_payload, AppHTTPException
from backoffice.core.request_id import REQUEST_ID_HEADER, set_request_id, ensure_request_id

"""
Application FastAPI (entrypoint).

Rôle (fonctionnel) :
- Configure l’application (settings, CORS, middlewares, routers).
- Centralise l’observabilité :
  - request_id propagé (X-Request-Id)
  - logs structurés JSON (timing, status, client_ip)
  - seuil de “slow request”
- Uniformise les erreurs côté client : toujours {"error": "<message>"}.
  - 400 : champ requis / valeur invalide (validation Pydantic)
  - 405 : "Method not allowed"
  - 500 : exceptions du store (message d’origine), JSON mal formé, imprévus

Ce fichier ne contient pas de logique métier :
- La logique métier est dans backoffice.services
- Les routes sont dans backoffice.api
- Les composants transverses sont dans backoffice.core
"""


# --- Force UTF-8 in Content-Type for JSON responses ---
class UTF8JSONResponse(JSONResponse):
    """Réponse JSON avec charset UTF-8 explicite (libellés FR)."""
    media_type = "application/json; charset=utf-8"


# --- Logging (niveau depuis .env si dispo) ---
setup_logging(settings.LOG_LEVEL)

# logger principal projet
log = logging.getLogger("backoffice")

# logger dédié observabilité HTTP (séparé du métier)
http_log = logging.getLogger("backoffice.http")

# seuil slow request (ms)
SLOW_MS = int(settings.SLOW_REQUEST_MS)


def _split_origins(value: str) -> list[str]:
    """Parse une liste d’origines CORS depuis une string 'a,b,c'."""
    if not value:
        return []
    return [o.strip() for o in value.split(",") if o.strip()]


app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    default_response_class=UTF8JSONResponse,
)

# --- CORS ---
origins = _split_origins(settings.CORS_ORIGINS) or ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,  # pas de cookies (API stateless)
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "X-API-Key",
        "X-User-Id",
        "X-User-Role",
        "X-User-Country",
        REQUEST_ID_HEADER,
    ],
)

# --- Routers ---
app.include_router(api_router)


# --- Middleware observabilité : request_id + timing + logs structurés ---
@app.middleware("http")
async def request_observability(request: Request, call_next):
    # Prend le header s’il existe, sinon génère un UUID
    rid = ensure_request_id(request.headers.get(REQUEST_ID_HEADER))
    request.state.request_id = rid

    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)

        if response is not None:
            response.headers[REQUEST_ID_HEADER] = rid
            # Toutes les réponses (erreurs comprises) sont consommables depuis n’importe quelle origine
            if "*" in origins:
                response.headers.setdefault("Access-Control-Allow-Origin", "*")

        principal = getattr(request.state, "principal", None)

        # Slow request => WARNING, sinon INFO
        level = logging.WARNING if duration_ms >= SLOW_MS else logging.INFO
        http_log.log(
            level,
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": getattr(response, "status_code", None),
                "duration_ms": duration_ms,
                "client_ip": request.client.host if request.client else None,
                "actor": getattr(principal, "identity", None),
            },
        )

        # Reset contextvar (propre en cas de réutilisation event loop / conteneur Lambda)
        set_request_id(None)


def _error(status_code: int, message: str) -> UTF8JSONResponse:
    return UTF8JSONResponse(status_code=status_code, content=error_payload(message))


# --- Error handlers : enveloppe {"error": ...}, pas de stacktrace côté client ---
@app.exception_handler(AppHTTPException)
async def app_http_exception_handler(request: Request, exc: AppHTTPException):
    """Erreurs applicatives (AppHTTPException) -> {"error": message}."""
    if exc.status_code >= 500:
        log.error("app_error", extra={"path": request.url.path, "status_code": exc.status_code})
    return _error(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Erreurs HTTP natives (404, 405, etc.)."""
    if exc.status_code == 405:
        return _error(405, "Method not allowed")
    if exc.status_code == 404:
        return _error(404, "Not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Erreurs de validation Pydantic.

    - JSON mal formé : 500 (erreur de parsing côté serveur)
    - champ manquant : 400 "Field <nom> is required"
    - autre : 400 "Field <nom> is invalid"
    """
    errors = exc.errors()
    first = errors[0] if errors else {}

    if first.get("type") == "json_invalid":
        return _error(500, f"Invalid JSON body: {first.get('msg', '')}".strip())

    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    field = loc[-1] if loc else "body"

    if first.get("type") == "missing":
        return _error(400, f"Field {field} is required")
    return _error(400, f"Field {field} is invalid")


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    """Exceptions du store (FK inconnue, contrainte, connexion…) -> 500 + message d’origine."""
    log.error("store_error", extra={"path": request.url.path}, exc_info=exc)
    cause = getattr(exc, "orig", None) or exc
    return _error(500, str(cause))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Fallback : toute exception non gérée -> 500 + log serveur."""
    log.exception("Unhandled error: %s", exc)
    return _error(500, str(exc) or "Internal server error")
