"""
backoffice.db

Package base de données : base déclarative, mixins communs et session async.

Contenu :
- base : Base SQLAlchemy + colonnes de suivi (createdAt/updatedAt, Inserteridentity/InserterCountry).
- session : engine + AsyncSession pour FastAPI (Depends(get_db)).
- migrations : configuration Alembic (côté sync) via DATABASE_URL_SYNC.
"""
