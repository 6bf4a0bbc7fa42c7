"""
backoffice.schemas

Package des schémas API (Pydantic).

Rôle (fonctionnel) :
- Définit les modèles d’entrée/sortie utilisés par l’API (request/response).
- Sépare clairement :
  - les modèles ORM (backoffice.models) = persistance DB
  - les schémas Pydantic (backoffice.schemas) = contrat HTTP / validation (noms camelCase du front)
"""
