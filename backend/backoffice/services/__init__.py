"""
backoffice.services

Package “services” : logique applicative indépendante des endpoints HTTP.

Rôle (fonctionnel) :
- crud : liste/filtre/pagination, création, mise à jour partielle, suppression (générique).
- registry : une déclaration par ressource (chemin, modèle, schémas, champs requis, recherche, filtres).
- dashboard_service : tableaux de bord par rôle.
- storage : dépôt des pièces jointes (bucket S3 compatible).

Principe :
- backoffice.api = transport HTTP (routes, validation, dépendances)
- backoffice.services = orchestration métier (réutilisable, testable)
- backoffice.models / backoffice.schemas = persistance et contrats
"""
