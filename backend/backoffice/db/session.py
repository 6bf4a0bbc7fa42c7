from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from backoffice.core.settings import settings

"""
DB Session.

Rôle (fonctionnel) :
- Initialise l’engine SQLAlchemy en mode async.
- Fournit une factory de sessions AsyncSession (AsyncSessionLocal).
- Expose `get_db()` comme dépendance FastAPI : une session par requête, fermée en fin de requête.

Notes :
- DB_NULL_POOL (serverless) : aucune connexion n’est conservée entre deux invocations.
- expire_on_commit=False : permet de sérialiser les objets après commit sans rechargement.
- SQLite (dev/tests) : activation des clés étrangères à chaque connexion.
"""


def build_engine(url: str, *, null_pool: bool = False, **kwargs):
    if null_pool:
        kwargs.setdefault("poolclass", NullPool)
    engine = create_async_engine(url, echo=False, **kwargs)

    if url.startswith("sqlite"):
        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_fk_on(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.DATABASE_URL, null_pool=settings.DB_NULL_POOL)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    """Dépendance FastAPI : yield une session DB et garantit sa fermeture."""
    async with AsyncSessionLocal() as session:
        yield session
