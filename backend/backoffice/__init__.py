"""
backoffice

Package racine du back-office multi-pays (personnel, parc automobile, finance, offres, alertes).

Rôle (fonctionnel) :
- Contient tout le code applicatif (API, logique métier, accès DB, schémas, présentation).
- Sert de point d’ancrage pour les imports : `from backoffice...`

Organisation (haute-level) :
- backoffice.api        : routes FastAPI (CRUD par ressource, dashboard, uploads, health)
- backoffice.core       : briques transverses (settings, errors, logs, request_id, sécurité, pays)
- backoffice.db         : base SQLAlchemy + session async
- backoffice.models     : modèles ORM (tables)
- backoffice.schemas    : schémas Pydantic (contrat HTTP camelCase)
- backoffice.services   : CRUD générique, registry des ressources, dashboards, stockage
- backoffice.views      : libellés FR, vues détail, listes locales
- backoffice.serverless : adaptateur Lambda / Netlify (Mangum)
"""
