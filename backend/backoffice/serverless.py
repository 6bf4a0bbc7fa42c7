from __future__ import annotations

import logging
from typing import Any

from mangum import Mangum

from backoffice.core.request_id import REQUEST_ID_HEADER, request_id_from_lambda
from backoffice.main import app

"""
Adaptateur serverless (AWS Lambda / API Gateway, fonctions Netlify).

Rôle (fonctionnel) :
- Sert la même application FastAPI pour des events `httpMethod` / `queryStringParameters` / `body`.
- Propage un request_id : header X-Request-Id de l’event, sinon aws_request_id du contexte Lambda.
- Chaque invocation ouvre/ferme sa session DB (get_db) ; avec DB_NULL_POOL aucune connexion
  ne survit à l’invocation.
"""

log = logging.getLogger("backoffice.serverless")

# Pas de lifespan : rien à initialiser au démarrage (engine créé à l’import)
asgi_handler = Mangum(app, lifespan="off")


def handler(event: dict[str, Any], context: Any):
    rid = request_id_from_lambda(event, context)
    if rid:
        headers = event.get("headers") or {}
        if not any(k.lower() == REQUEST_ID_HEADER.lower() for k in headers):
            headers[REQUEST_ID_HEADER] = rid
        event["headers"] = headers

    log.debug("invocation", extra={"method": event.get("httpMethod"), "path": event.get("path")})
    return asgi_handler(event, context)
