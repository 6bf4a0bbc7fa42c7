"""
backoffice.core

Package “cœur” : tout ce qui est transversal (cross-cutting concerns), c’est-à-dire ce qui
s’applique à toutes les ressources sans dépendre d’un domaine métier précis.

- settings
  Configuration (variables d’environnement, DB, pagination, stockage S3).

- errors
  Enveloppe d’erreur unique {"error": "<message>"} et exception applicative AppHTTPException.

- logging / request_id
  Logs JSON enrichis d’un identifiant de requête (header, contexte Lambda ou UUID).

- security
  API key optionnelle, Principal (identité, rôle, pays) et matrice rôle -> domaines.

- countries
  Référentiel des pays et normalisation des codes envoyés par le front.
"""
